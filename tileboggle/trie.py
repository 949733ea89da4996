from typing import Iterable, Self

MIN_WORD_LENGTH = 3


def normalize_word(word: str) -> str:
    return word.lower()


def is_candidate_word(word: str) -> bool:
    """Words shorter than three letters are never searched for."""
    return len(word) >= MIN_WORD_LENGTH


class PyTrie:
    _children: dict[str, Self]
    _mark: int
    _is_word: bool

    def __init__(self):
        self._is_word = False
        self._mark = 0
        self._children = {}
        self.word_id = None

    def descend(self, letter: str):
        return self._children.get(letter)

    def descend_text(self, text: str):
        """Follow every letter of a (possibly multi-letter) tile, or return None."""
        t = self
        for letter in text:
            t = t._children.get(letter)
            if t is None:
                return None
        return t

    def is_word(self):
        return self._is_word

    def mark(self):
        return self._mark

    def set_mark(self, mark):
        self._mark = mark

    # ---

    def set_is_word(self):
        self._is_word = True

    def add_word(self, word: str) -> Self:
        t = self
        for letter in word:
            child = t._children.get(letter)
            if child is None:
                child = t._children[letter] = PyTrie()
            t = child
        t.set_is_word()
        return t

    def size(self):
        return (1 if self.is_word() else 0) + sum(
            c.size() for c in self._children.values()
        )

    def find_word(self, word: str):
        t = self.descend_text(word)
        if t is None or not t.is_word():
            return None
        return t

    def reset_marks(self):
        self.set_mark(0)
        for child in self._children.values():
            child.reset_marks()

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> Self:
        """Each word node's word_id is the index of its first spelling in words."""
        trie = PyTrie()
        for i, word in enumerate(words):
            if not is_candidate_word(word):
                continue
            node = trie.add_word(normalize_word(word))
            if node.word_id is None:
                node.word_id = i
        return trie


def make_lookup_table(t: PyTrie, prefix="", out=None) -> dict[PyTrie, str]:
    """Construct a Trie -> str table for debugging."""
    out = out if out is not None else {}
    out[t] = prefix
    for letter, child in t._children.items():
        make_lookup_table(child, prefix + letter, out)
    return out


def load_words(dict_input: str) -> list[str]:
    with open(dict_input) as f:
        return [word for line in f if (word := line.strip())]


def make_py_trie(dict_input: str) -> tuple[PyTrie, list[str]]:
    words = load_words(dict_input)
    return PyTrie.create_from_wordlist(words), words
