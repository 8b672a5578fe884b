import pytest

from aseres.identifier import convert_file_name_to_identifier, split_words


@pytest.mark.parametrize("text, expected", [
    ("test", "test"),
    ("Test", "test"),
    ("  \n \r \t  Test String  \n \t \r With TXT White Space \t \t \r \n   ",
     "test_string_with_txt_white_space"),
    ("test_snake_cased_string", "test_snake_cased_string"),
    ("test-kebab-cased-string", "test_kebab_cased_string"),
    ("TEST_SNAKE_CASED_STRING", "test_snake_cased_string"),
    ("TEST-KEBAB-CASED-STRING", "test_kebab_cased_string"),
    ("_test_snake_cased_string", "test_snake_cased_string"),
    ("-test-kebab-cased-string", "test_kebab_cased_string"),
    ("TestPascalCasedTXTString", "test_pascal_cased_txt_string"),
    ("testCamelCasedTXTString", "test_camel_cased_txt_string"),
    ("TestPascalCasedStringTXT", "test_pascal_cased_string_txt"),
    ("testCamelCasedStringTXT", "test_camel_cased_string_txt"),
    ("TXTTestPascalCasedString", "txt_test_pascal_cased_string"),
    ("TestPascalCasedTXString", "test_pascal_cased_tx_string"),
    ("testCamelCasedTXString", "test_camel_cased_tx_string"),
    ("TestPascalCasedStringTX", "test_pascal_cased_string_tx"),
    ("testCamelCasedStringTX", "test_camel_cased_string_tx"),
    ("TXTestPascalCasedString", "tx_test_pascal_cased_string"),
    ("TestPascalCasedTString", "test_pascal_cased_t_string"),
    ("testCamelCasedTString", "test_camel_cased_t_string"),
    ("TestPascalCasedStringT", "test_pascal_cased_string_t"),
    ("testCamelCasedStringT", "test_camel_cased_string_t"),
    ("TTestPascalCasedString", "t_test_pascal_cased_string"),
    ("TXT", "txt"),
    ("A B C", "a_b_c"),
    ("_test-kebab_Mixed", "test_kebab_mixed"),
    ("hero2Walk", "hero2walk"),
    ("A1Bc", "a1bc"),
    ("Hero_IDLE", "hero_idle"),
    ("parseHTML", "parse_html"),
])
def test_convert_file_name_to_identifier(text, expected):
    assert convert_file_name_to_identifier(text) == expected


@pytest.mark.parametrize("text", ["", "_", " -_\t- ", "__--__"])
def test_separators_only_give_empty_identifier(text):
    assert convert_file_name_to_identifier(text) == ""


@pytest.mark.parametrize("text", [
    "TestPascalCasedTXTString",
    "  Test String With TXT ",
    "_test-kebab_Mixed",
    "A B C",
])
def test_normalizing_is_idempotent(text):
    once = convert_file_name_to_identifier(text)
    assert convert_file_name_to_identifier(once) == once


def test_split_words_keeps_trailing_acronym_whole():
    assert split_words("parseHTML") == ["parse", "HTML"]
    assert split_words("HTMLParser") == ["HTML", "Parser"]
    assert split_words("ABC") == ["ABC"]


def test_split_words_keeps_final_capital_in_its_run():
    assert split_words("TXT") == ["TXT"]
    assert split_words("StringT") == ["String", "T"]
    assert split_words("AB") == ["AB"]


def test_split_words_after_digit_starts_fresh():
    assert split_words("hero2Walk") == ["hero2Walk"]
    assert split_words("A1Bc") == ["A1Bc"]
    assert split_words("v2HTMLFile") == ["v2HTML", "File"]
