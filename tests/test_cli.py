import json

from json_csv_flattener.cli import main


def test_convert_to_stdout(mixed_json_file, capsys):
    assert main(['convert', str(mixed_json_file)]) == 0
    assert capsys.readouterr().out == 'name,items_id\nx,1\nx,2\n'


def test_convert_with_options(mixed_json_file, capsys):
    assert main(['convert', str(mixed_json_file), '--separator', '.', '--delimiter', 'tab']) == 0
    assert capsys.readouterr().out == 'name\titems.id\nx\t1\nx\t2\n'


def test_convert_to_file(mixed_json_file, tmp_path):
    output = tmp_path / 'out.csv'
    assert main(['convert', str(mixed_json_file), '--output', str(output)]) == 0
    assert output.read_text(encoding='utf-8') == 'name,items_id\nx,1\nx,2\n'


def test_convert_with_schema(mixed_json_file, tmp_path, capsys):
    schema = tmp_path / 'schema.json'
    schema.write_text(json.dumps({"items": [{"id": 0}]}), encoding='utf-8')
    assert main(['convert', str(mixed_json_file), '--schema', str(schema)]) == 0
    assert capsys.readouterr().out == 'items_id\n1\n2\n'


def test_headers_command(mixed_json_file, capsys):
    assert main(['headers', str(mixed_json_file)]) == 0
    assert capsys.readouterr().out == 'name,items_id\n'


def test_missing_input_file(tmp_path, capsys):
    assert main(['convert', str(tmp_path / 'missing.json')]) == 2
    assert 'error:' in capsys.readouterr().err


def test_malformed_input_file(tmp_path, capsys):
    path = tmp_path / 'bad.json'
    path.write_text('[1, 2', encoding='utf-8')
    assert main(['convert', str(path)]) == 2
    assert 'Error parsing json' in capsys.readouterr().err


def test_non_utf8_input_file(tmp_path, capsys):
    path = tmp_path / 'latin1.json'
    path.write_bytes('{"name": "café"}'.encode('latin-1'))
    assert main(['convert', str(path)]) == 2
    assert 'not valid UTF-8' in capsys.readouterr().err


def test_encoding_applies_to_output_file(mixed_json_file, tmp_path):
    output = tmp_path / 'out.csv'
    assert main(['convert', str(mixed_json_file), '--output', str(output), '--encoding', 'utf-16']) == 0
    assert output.read_text(encoding='utf-16') == 'name,items_id\nx,1\nx,2\n'
