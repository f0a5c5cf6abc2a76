from instructions.normalize import collapse_spaces, finish, sentence_cased
from phrases import DictionaryMeta


def test_pairs_of_spaces_collapse_once():
    assert collapse_spaces("your  destination") == "your destination"
    # a single pass: three spaces only lose one
    assert collapse_spaces("a   b") == "a  b"
    assert collapse_spaces("a    b") == "a  b"


def test_finish_capitalizes_when_asked():
    assert finish("a   b", DictionaryMeta(True)) == "A  b"
    assert finish("turn left", DictionaryMeta(capitalize_first_letter=True)) == "Turn left"


def test_finish_without_capitalization():
    assert finish("go  to", DictionaryMeta(False)) == "go to"
    assert finish("scharf links abbiegen", DictionaryMeta()) == "scharf links abbiegen"


def test_empty_text():
    assert sentence_cased("") == ""
    assert finish("", DictionaryMeta(True)) == ""


def test_only_first_letter_changes():
    assert sentence_cased("enter the Dupont Circle") == "Enter the Dupont Circle"
