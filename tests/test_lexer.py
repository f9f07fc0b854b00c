from minish.lexer import LexState, Transition, step, tokenize


def test_double_quotes_group_words():
    assert tokenize('a "b c" d') == ["a", "b c", "d"]


def test_single_quotes_keep_backslashes():
    assert tokenize(r"'a\nb'") == ["a\\nb"]


def test_double_quote_escapes():
    assert tokenize(r'"a\$b"') == ["a$b"]
    assert tokenize(r'"a\qb"') == ["a\\qb"]
    assert tokenize(r'"say \"hi\" \\ now"') == ['say "hi" \\ now']


def test_unquoted_backslash_escapes_next_char():
    assert tokenize(r"one\ two three") == ["one two", "three"]
    assert tokenize(r"\'quoted\'") == ["'quoted'"]


def test_whitespace_collapses_and_trims():
    assert tokenize("  echo\t hello   world \n") == ["echo", "hello", "world"]
    assert tokenize("   ") == []


def test_adjacent_quotes_join_into_one_word():
    assert tokenize("'hello''world'") == ["helloworld"]
    assert tokenize('ab"cd"\'ef\'') == ["abcdef"]


def test_unterminated_quote_runs_to_end():
    assert tokenize("echo 'never closed") == ["echo", "never closed"]
    assert tokenize('echo "open') == ["echo", "open"]


def test_trailing_backslash_is_dropped():
    assert tokenize("abc\\") == ["abc"]


def test_step_is_pure():
    assert step(LexState.UNQUOTED, "'") == Transition(LexState.SINGLE_QUOTED)
    assert step(LexState.UNQUOTED, " ") == Transition(LexState.UNQUOTED, split=True)
    assert step(LexState.ESCAPE_DOUBLE_QUOTED, "n") == Transition(LexState.DOUBLE_QUOTED, "\\n")
    assert step(LexState.ESCAPE_UNQUOTED, " ") == Transition(LexState.UNQUOTED, " ")
