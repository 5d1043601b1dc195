import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from modules.long_string import CHAR_WIDTH, LongString, byte_length
from config.page_content import FILLER_TEXT, MAIN_TEXT

LOGGER_NAME = 'long_string.component'


def _logged_messages(caplog):
    return [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]


def test_default_content_is_the_page_content():
    component = LongString()
    assert component.main_text == MAIN_TEXT
    assert component.filler_text == FILLER_TEXT
    assert component.main_text.startswith('# Pattern Matching in C#')
    assert set(component.filler_text) == {'.', '\n'}


def test_accessors_are_stable_across_calls():
    component = LongString()
    first_main, first_filler = component.main_text, component.filler_text
    for _ in range(3):
        assert component.main_text is first_main
        assert component.filler_text is first_filler
    assert first_main and first_filler


def test_content_is_read_only():
    component = LongString()
    with pytest.raises(AttributeError):
        component.main_text = 'changed'
    with pytest.raises(AttributeError):
        component.filler_text = 'changed'


def test_on_init_logs_both_sizes_in_order(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    component = LongString(main_text='abc', filler_text='....', char_width=2)

    result = component.on_init()

    assert result == (6, 8)
    assert _logged_messages(caplog) == ['6', '8']


def test_on_init_logs_default_content_sizes(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    LongString().on_init()

    assert _logged_messages(caplog) == [
        str(len(MAIN_TEXT) * CHAR_WIDTH),
        str(len(FILLER_TEXT) * CHAR_WIDTH),
    ]


def test_on_init_does_not_mutate_content(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    component = LongString(main_text='abc', filler_text='....')
    component.on_init()
    component.on_init()
    assert component.main_text == 'abc'
    assert component.filler_text == '....'


def test_empty_content_logs_zero(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    component = LongString(main_text='', filler_text='..')

    assert component.on_init() == (0, 4)
    assert _logged_messages(caplog) == ['0', '4']


def test_initialized_state_transition():
    component = LongString(main_text='a', filler_text='b')
    assert component.initialized is False
    component.on_init()
    assert component.initialized is True


def test_custom_logger_receives_records(caplog):
    caplog.set_level(logging.DEBUG, logger='custom.sink')
    component = LongString(main_text='ab', filler_text='c', char_width=1,
                           logger=logging.getLogger('custom.sink'))
    component.on_init()
    messages = [r.getMessage() for r in caplog.records if r.name == 'custom.sink']
    assert messages == ['2', '1']


@pytest.mark.parametrize('value', [None, 42, b'bytes'])
def test_non_string_content_is_rejected(value):
    with pytest.raises(TypeError):
        LongString(main_text=value)
    with pytest.raises(TypeError):
        LongString(filler_text=value)


def test_byte_length_fixed_width():
    assert byte_length('abc') == 6
    assert byte_length('abc', char_width=4) == 12
    assert byte_length('') == 0


def test_byte_length_encoded_is_exact():
    assert byte_length('abc', encoding='utf-8') == 3
    assert byte_length('✅', encoding='utf-8') == 3
    assert byte_length('✅', encoding='utf-16-le') == 2
    # fixed width ignores the encoding of non-ascii characters
    assert byte_length('✅') == 2


@pytest.mark.parametrize('width', [0, -1, 1.5, True])
def test_invalid_char_width_fails_at_construction(width):
    with pytest.raises(ValueError):
        LongString(char_width=width)


def test_unknown_encoding_fails_at_construction():
    with pytest.raises(LookupError):
        LongString(encoding='not-an-encoding')


def test_from_settings_reads_sizing_section():
    component = LongString.from_settings({'sizing': {'char_width': 1, 'encoding': None}})
    assert component.sizes() == (len(MAIN_TEXT), len(FILLER_TEXT))

    encoded = LongString.from_settings({'sizing': {'encoding': 'utf-8'}})
    assert encoded.sizes()[0] == len(MAIN_TEXT.encode('utf-8'))


def test_from_settings_defaults_when_section_missing():
    component = LongString.from_settings({})
    assert component.char_width == CHAR_WIDTH
    assert component.encoding is None
