import pytest

from folder_search.features.file_search.data.pattern_matcher import (
    GlobPattern,
    RegexPattern,
    build_matcher,
    glob_to_regex,
)
from folder_search.features.file_search.domain.errors import InvalidPatternError
from folder_search.features.file_search.domain.models import SearchOptions

# --- GLOB ---

def test_star_glob_is_anchored():
    matcher = GlobPattern("*.txt")
    assert matcher.matches("a.txt")
    assert matcher.matches("notes.txt")
    assert not matcher.matches("a.txt.bak")

def test_question_mark_matches_exactly_one_character():
    matcher = GlobPattern("report?.csv")
    assert matcher.matches("report1.csv")
    assert not matcher.matches("report12.csv")
    assert not matcher.matches("report.csv")

def test_star_matches_empty_run():
    assert GlobPattern("*.txt").matches(".txt")
    assert GlobPattern("a*").matches("a")

def test_regex_metacharacters_are_literal_in_globs():
    matcher = GlobPattern("a+b(1).txt", ignore_case=False)
    assert matcher.matches("a+b(1).txt")
    assert not matcher.matches("aab1.txt")

    brackets = GlobPattern("[x].txt")
    assert brackets.matches("[x].txt")
    assert not brackets.matches("x.txt")

def test_dot_is_not_a_wildcard():
    assert not GlobPattern("a.txt").matches("abtxt")

def test_glob_to_regex_translation():
    assert glob_to_regex("*.c?") == r".*\.c."

def test_glob_case_sensitivity():
    assert GlobPattern("*.TXT", ignore_case=True).matches("a.txt")
    assert not GlobPattern("*.TXT", ignore_case=False).matches("a.txt")

# --- REGEX ---

def test_regex_is_substring_search():
    matcher = RegexPattern(r"\d+")
    assert matcher.matches("file123.log")
    assert not matcher.matches("file.log")

def test_regex_can_be_anchored_explicitly():
    matcher = RegexPattern(r"^log_\d{4}\.txt$")
    assert matcher.matches("log_2024.txt")
    assert not matcher.matches("old_log_2024.txt")

def test_regex_case_sensitivity():
    assert RegexPattern("README", ignore_case=True).matches("readme.md")
    assert not RegexPattern("README", ignore_case=False).matches("readme.md")

def test_invalid_regex_raises_on_construction():
    with pytest.raises(InvalidPatternError) as exc_info:
        RegexPattern("([unclosed")
    assert exc_info.value.pattern == "([unclosed"
    assert isinstance(exc_info.value, ValueError)

# --- FACTORY ---

def test_build_matcher_picks_variant_from_options():
    glob = build_matcher(SearchOptions(pattern="*.txt"))
    regex = build_matcher(SearchOptions(pattern=r"\.txt$", use_regex=True))
    assert isinstance(glob, GlobPattern)
    assert isinstance(regex, RegexPattern)

def test_build_matcher_honours_ignore_case():
    matcher = build_matcher(SearchOptions(pattern="*.TXT", ignore_case=False))
    assert not matcher.matches("a.txt")
