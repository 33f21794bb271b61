import pytest

from json_csv_flattener.paths import Field, Index, canonical_header, canonicalize, parse_header


def test_empty_path_is_unnamed_column():
    assert canonical_header(()) == ''


def test_primitive_array_keeps_final_index():
    assert canonical_header((Field('tags'), Index(0))) == 'tags[0]'
    assert canonical_header((Field('tags'), Index(1))) == 'tags[1]'


def test_object_array_indices_are_dropped():
    assert canonical_header((Field('items'), Index(1), Field('id'))) == 'items/id'
    assert canonical_header((Index(0), Field('id'))) == 'id'


def test_nested_primitive_array_keeps_only_last_index():
    assert canonical_header((Field('m'), Index(0), Index(1))) == 'm[1]'


def test_root_primitive_array():
    assert canonical_header((Index(2),)) == '[2]'


def test_plain_fields_joined_with_slash():
    assert canonical_header((Field('a'), Field('b'), Field('c'))) == 'a/b/c'


def test_parse_header():
    assert parse_header('a/b[0]') == (Field('a'), Field('b'), Index(0))
    assert parse_header('$id') == (Field('$id'),)
    assert parse_header('') == ()


def test_parse_header_reads_escaped_field_names():
    assert parse_header('a\\[1\\]/x') == (Field('a[1]'), Field('x'))
    assert parse_header('a\\/b[2]') == (Field('a/b'), Index(2))


def test_reserved_characters_in_field_names_are_escaped():
    assert canonical_header((Field('a[1]'), Field('x'))) == 'a\\[1\\]/x'
    assert canonical_header((Field('a/b'),)) == 'a\\/b'
    assert canonical_header((Field('$id'),)) == '$id'


def test_leading_delimiters_are_stripped():
    assert canonical_header((Field(''), Field('x'))) == 'x'


def test_canonicalize_positional_header():
    assert canonicalize('/items[0]/id') == 'items/id'
    assert canonicalize('m[0][2]') == 'm[2]'


@pytest.mark.parametrize('header', ['a/b', 'tags[0]', 'items[3]/id', '[1]', 'm[0][2]', '', '/x/y'])
def test_canonicalize_is_idempotent(header):
    once = canonicalize(header)
    assert canonicalize(once) == once


@pytest.mark.parametrize('path', [
    (Field('tags'), Index(4)),
    (Field('a'), Index(0), Field('b'), Index(2), Field('c')),
    (Field('a'), Field('b')),
    (Index(0),),
    (Field('a[1]'), Field('x')),
    (Field('$id'),),
    (Field('a/b'), Field('c'), Index(0)),
    (Field('back\\slash'), Field('end\\'), Index(3)),
    (Field('a'), Field(''), Index(0)),
    (Field(''), Field(''), Field('x')),
])
def test_canonical_header_is_a_fixed_point(path):
    header = canonical_header(path)
    assert canonicalize(header) == header
