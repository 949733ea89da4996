from tileboggle.trie import (
    PyTrie,
    is_candidate_word,
    make_lookup_table,
    make_py_trie,
    normalize_word,
)


def test_trie():
    t = PyTrie.create_from_wordlist(
        [
            "agriculture",
            "culture",
            "boggle",
            "tea",
            "sea",
            "teapot",
        ]
    )
    assert not t.is_word()

    assert t.size() == 6
    assert t.find_word("agriculture") is not None
    assert t.find_word("culture") is not None
    assert t.find_word("boggle") is not None
    assert t.find_word("tea") is not None
    assert t.find_word("sea") is not None
    assert t.find_word("teapot") is not None

    assert t.find_word("teap") is None
    assert t.find_word("random") is None
    assert t.find_word("cultur") is None

    wd = t.descend("t")
    assert wd is not None
    wd = wd.descend("e")
    assert wd is not None
    wd = wd.descend("a")
    assert wd is not None
    assert wd.mark() == 0
    wd.set_mark(12345)
    assert wd.mark() == 12345
    t.reset_marks()
    assert wd.mark() == 0

    lookup = make_lookup_table(t)
    assert lookup[t.find_word("agriculture")] == "agriculture"


def test_descend_text():
    t = PyTrie.create_from_wordlist(["quart", "stack"])
    assert t.descend_text("qu") is t.descend("q").descend("u")
    assert t.descend_text("st") is not None
    assert t.descend_text("qa") is None
    assert t.descend_text("") is t


def test_word_ids():
    words = ["ab", "Tea", "sea", "TEA", "tea", ""]
    t = PyTrie.create_from_wordlist(words)
    assert t.size() == 2
    assert t.find_word("ab") is None
    assert t.find_word("tea").word_id == 1
    assert t.find_word("sea").word_id == 2


def test_candidate_words():
    assert not is_candidate_word("")
    assert not is_candidate_word("ab")
    assert is_candidate_word("abc")
    assert normalize_word("QuArT") == "quart"


def test_load_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("wood\n\nWOOF\nqi\n")
    t, words = make_py_trie(str(path))
    assert words == ["wood", "WOOF", "qi"]
    assert t.size() == 2
    assert t.find_word("wood") is not None
    assert t.find_word("woof").word_id == 1
    assert t.find_word("woxd") is None
