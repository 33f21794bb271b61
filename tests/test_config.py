import dataclasses

import pytest

from json_csv_flattener.config import FlattenConfig, parse_delimiter
from json_csv_flattener.errors import InvalidInputError


def test_defaults():
    config = FlattenConfig()
    assert (config.separator, config.delimiter, config.null_value, config.encoding) == ('_', ',', '', 'utf-8')


def test_create_substitutes_defaults_for_none():
    config = FlattenConfig.create(separator=None, delimiter=';')
    assert config.separator == '_'
    assert config.delimiter == ';'


def test_empty_separator_is_allowed():
    assert FlattenConfig.create(separator='').separator == ''


def test_empty_delimiter_is_rejected():
    with pytest.raises(InvalidInputError):
        FlattenConfig(delimiter='')


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        FlattenConfig().separator = '-'


@pytest.mark.parametrize('raw, expected', [('tab', '\t'), ('\\t', '\t'), (';', ';'), ('', None), (None, None)])
def test_parse_delimiter(raw, expected):
    assert parse_delimiter(raw) == expected
