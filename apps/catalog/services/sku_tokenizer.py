"""
SKU tokenization and the canonical option vocabulary.

SKUs follow the catalog convention MODEL-COLOR-CONNECTION, e.g.
"LGOLEDC3-SIL-WIF". Every hyphen-delimited segment is a token; tokens are
mapped to canonical option values through VOCABULARY, the one table consulted
everywhere option values are inferred from SKU content.
"""

from typing import Dict, List, Tuple

SKU_DELIMITER = '-'

COLOR_AXIS = 'Color'
CONNECTION_AXIS = 'Connection'
GENERIC_AXIS = 'Options'

# Entries are in priority order: when a SKU carries several tokens for one
# axis, the entry listed first wins.
VOCABULARY: List[Tuple[str, Dict[str, str]]] = [
    (COLOR_AXIS, {
        'sil': 'Silver',
        'blu': 'Blue',
        'red': 'Red',
        'whi': 'White',
        'bla': 'Black',
    }),
    (CONNECTION_AXIS, {
        'wif': 'WiFi',
        'wir': 'Wired',
    }),
]


def tokenize(sku_code: str) -> List[str]:
    """
    Split a SKU into its raw tokens, preserving case and order.

    A SKU without delimiters (or an empty one) is a single token.
    """
    return (sku_code or '').split(SKU_DELIMITER)


def axis_values(tokens: List[str]) -> Dict[str, str]:
    """
    Map raw tokens to {axis_name: canonical_value}, case-insensitively.

    Each axis gets at most one value: the first entry of its table present
    among the tokens, so "X-BLU-SIL" is Silver whatever the token order.
    """
    keys = {token.strip().lower() for token in tokens}
    values: Dict[str, str] = {}
    for axis_name, table in VOCABULARY:
        for key, value in table.items():
            if key in keys:
                values[axis_name] = value
                break
    return values


def generic_value(sku_code: str) -> str:
    """Display value for a SKU nothing in the vocabulary recognizes."""
    return tokenize(sku_code)[-1] or sku_code or ''

