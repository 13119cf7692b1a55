from subsolver.core.utils import apply_translation, normalize_ciphertext, order_tokens, tokenize


def test_normalize_strips_punctuation():
    assert normalize_ciphertext("Ab, cd! e-f") == "AB CD EF"
    assert normalize_ciphertext("don't") == "DONT"


def test_normalize_keeps_embedded_apostrophes():
    assert normalize_ciphertext("don't 'quoted' x''y", keep_apostrophes=True) == "DON'T QUOTED XY"


def test_tokenize_splits_on_any_whitespace():
    assert tokenize("ab  cd\nef\tgh") == ["AB", "CD", "EF", "GH"]
    assert tokenize("  ") == []


def test_order_tokens_longest_first_stable():
    assert order_tokens(["AB", "CDE", "FG", "H", "IJK"]) == ["CDE", "IJK", "AB", "FG", "H"]


def test_apply_translation_leaves_unmapped():
    assert apply_translation("ABC D!", {"A": "x", "D": "y"}) == "xBC y!"
    assert apply_translation("ABC", {}) == "ABC"
