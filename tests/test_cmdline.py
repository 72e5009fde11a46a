import pytest

from svnshell.cmdline import CmdlineError, split_cmdline


def test_plain_words():
    assert split_cmdline("svnserve -t") == ["svnserve", "-t"]


def test_multiple_spaces_collapse():
    assert split_cmdline("svnserve \t  -t\n--foo") == ["svnserve", "-t", "--foo"]


def test_trailing_whitespace_dropped():
    assert split_cmdline("svnserve -t   ") == ["svnserve", "-t"]


def test_empty_string_gives_no_arguments():
    assert split_cmdline("") == []


def test_leading_whitespace_gives_empty_first_argument():
    result = split_cmdline("  svnserve")
    assert result[0] == ""
    assert result[1:] == ["svnserve"]


def test_single_quotes_group_and_keep_backslash():
    assert split_cmdline("a 'b c\\d'") == ["a", "b c\\d"]


def test_double_quotes_group_and_allow_escape():
    assert split_cmdline('a "b \\"c"') == ["a", 'b "c']


def test_other_quote_kept_inside_quotes():
    assert split_cmdline("\"it's\" 'say \"hi\"'") == ["it's", 'say "hi"']


def test_backslash_escapes_space():
    assert split_cmdline("a\\ b c") == ["a b", "c"]


def test_quotes_join_adjacent_text():
    assert split_cmdline("ab'cd'\"ef\"") == ["abcdef"]


def test_empty_quoted_middle_argument_kept():
    assert split_cmdline("a '' b") == ["a", "", "b"]


def test_empty_final_argument_dropped():
    assert split_cmdline("a ''") == ["a"]


def test_trailing_backslash_is_error():
    with pytest.raises(CmdlineError) as info:
        split_cmdline("svnserve -t\\")
    assert str(info.value) == "cmdline ends with \\"


def test_unclosed_quote_is_error():
    with pytest.raises(CmdlineError) as info:
        split_cmdline("svnserve 'abc")
    assert str(info.value) == "unclosed quote"


def test_trailing_backslash_inside_single_quotes_is_unclosed_quote():
    with pytest.raises(CmdlineError) as info:
        split_cmdline("a '\\")
    assert str(info.value) == CmdlineError.UNCLOSED_QUOTE


def test_error_is_value_error():
    with pytest.raises(ValueError):
        split_cmdline('"')


@pytest.mark.parametrize(
    "words",
    [["svnserve", "-t"], ["x"], ["one", "two", "three", "four"]],
)
def test_join_and_split_round_trip(words):
    assert split_cmdline(" ".join(words)) == words