"""Trie data structure for entity name prefix matching.

Used by the entity unescaper to find the longest entity name at a given
position of the input without slicing it: ``&notin;`` must resolve to
``notin`` and not stop at ``not``.
"""


class TrieNode:
    """Single node in the trie tree."""
    __slots__ = ("children", "value", "is_terminal")

    def __init__(self):
        self.children = {}  # char -> TrieNode
        self.value = None  # Code point (or None if non-terminal)
        self.is_terminal = False  # True if this node ends a complete entity name


class Trie:
    """Trie mapping entity names to code points.

    Usage:
        trie = Trie({"not": 0xAC, "notin": 0x2209})

        # Find longest matching entity name starting at index 1
        end, value = trie.longest_prefix_item("&notin;", 1)
        # Returns (6, 0x2209), not (4, 0xAC)
    """

    __slots__ = ("root", "max_depth")

    def __init__(self, entities=None):
        """Build trie from entity name -> code point mapping."""
        self.root = TrieNode()
        self.max_depth = 0
        for name, value in (entities or {}).items():
            self.insert(name, value)

    def insert(self, name, value):
        """Insert entity name into trie, replacing any previous value."""
        node = self.root
        children = node.children
        for char in name:
            if char not in children:
                children[char] = TrieNode()
            node = children[char]
            children = node.children
        node.is_terminal = True
        node.value = value
        if len(name) > self.max_depth:
            self.max_depth = len(name)

    def longest_prefix_item(self, text, start=0):
        """Find the longest entity name that is a prefix of ``text[start:]``.

        Walks the trie one character at a time, remembering the last terminal
        node, so a short name never shadows a longer one at the same position.

        Raises:
            KeyError: if no entity name matches at *start*

        Returns:
            tuple: (end_index, value) where ``text[start:end_index]`` is the name
        """
        node = self.root
        longest_end = start
        longest_value = None
        children = node.children

        for i in range(start, min(len(text), start + self.max_depth)):
            char = text[i]
            if char not in children:
                break
            node = children[char]
            if node.is_terminal:
                longest_end = i + 1
                longest_value = node.value
            children = node.children

        if longest_end == start:
            raise KeyError(f"No entity prefix match at {start} in {text[start:start + 16]!r}")

        return longest_end, longest_value

    def __contains__(self, name):
        """Check if entity name exists in trie."""
        node = self.root
        for char in name:
            node_children = node.children
            if char not in node_children:
                return False
            node = node_children[char]
        return node.is_terminal
