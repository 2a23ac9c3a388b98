"""Pin SKU tokenization and vocabulary lookups."""

from apps.catalog.services.sku_tokenizer import (
    COLOR_AXIS,
    CONNECTION_AXIS,
    axis_values,
    generic_value,
    tokenize,
)


class TestTokenize:
    def test_splits_on_hyphen_in_order(self):
        assert tokenize('LGOLEDC3-SIL-WIF') == ['LGOLEDC3', 'SIL', 'WIF']

    def test_case_is_preserved(self):
        assert tokenize('ab-Sil-wIf') == ['ab', 'Sil', 'wIf']

    def test_no_delimiter_is_single_token(self):
        assert tokenize('XJ9') == ['XJ9']

    def test_empty_sku(self):
        assert tokenize('') == ['']

    def test_empty_segments_are_kept(self):
        assert tokenize('A--B') == ['A', '', 'B']


class TestAxisValues:
    def test_color_tokens(self):
        assert axis_values(['sil']) == {COLOR_AXIS: 'Silver'}
        assert axis_values(['BLU']) == {COLOR_AXIS: 'Blue'}
        assert axis_values(['Red']) == {COLOR_AXIS: 'Red'}
        assert axis_values(['WHI']) == {COLOR_AXIS: 'White'}
        assert axis_values(['bla']) == {COLOR_AXIS: 'Black'}

    def test_connection_tokens(self):
        assert axis_values(['WIF']) == {CONNECTION_AXIS: 'WiFi'}
        assert axis_values(['wir']) == {CONNECTION_AXIS: 'Wired'}

    def test_both_axes(self):
        assert axis_values(['LGOLEDC3', 'SIL', 'WIF']) == {
            COLOR_AXIS: 'Silver',
            CONNECTION_AXIS: 'WiFi',
        }

    def test_unknown_tokens(self):
        assert axis_values(['LGOLEDC3', 'CUSTOM']) == {}
        assert axis_values(['']) == {}

    def test_whole_token_must_match(self):
        """'SILVER' is not the 'sil' abbreviation."""
        assert axis_values(['SILVER']) == {}

    def test_vocabulary_order_decides_between_tokens(self):
        """Silver is listed before Blue, so it wins in either token order."""
        assert axis_values(['BLU', 'SIL']) == {COLOR_AXIS: 'Silver'}
        assert axis_values(['SIL', 'BLU']) == {COLOR_AXIS: 'Silver'}
        assert axis_values(['WIR', 'WIF']) == {CONNECTION_AXIS: 'WiFi'}


class TestGenericValue:
    def test_last_segment(self):
        assert generic_value('XJ9-CUSTOM') == 'CUSTOM'

    def test_no_delimiter_is_whole_sku(self):
        assert generic_value('PLAIN') == 'PLAIN'

    def test_trailing_delimiter_falls_back_to_sku(self):
        assert generic_value('ABC-') == 'ABC-'
