"""Aho-Corasick automaton over the lowercase Latin alphabet with lazy transitions."""

from __future__ import annotations

from dataclasses import dataclass, field

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def _check_char(ch):
    if len(ch) != 1 or ch not in ALPHABET:
        raise ValueError(f"character {ch!r} is not a lowercase letter a-z")


@dataclass
class Vertex:
    """A trie node together with its lazily computed automaton data."""

    parent: int = -1
    parent_char: str = "$"
    children: dict = field(default_factory=dict)
    transitions: dict = field(default_factory=dict)
    suffix_link: int | None = None
    exit_link: int | None = None
    exit_link_known: bool = False
    leaf: bool = False
    index: int | None = None


class AhoCorasick:
    """Trie of patterns whose suffix links and transitions are computed on demand.

    Vertex 0 is the root.
    """

    def __init__(self):
        self.vertices = [Vertex()]

    def add_string(self, text, index):
        """Insert ``text`` tagged with ``index``; return the vertex where it ends."""
        v = 0
        for ch in text:
            _check_char(ch)
            vertex = self.vertices[v]
            if ch not in vertex.children:
                vertex.children[ch] = len(self.vertices)
                self.vertices.append(Vertex(parent=v, parent_char=ch))
            v = vertex.children[ch]
        end = self.vertices[v]
        end.leaf = True
        end.index = index
        return v

    def link(self, v):
        """Vertex of the longest proper suffix of ``v``'s string that is in the trie."""
        vertex = self.vertices[v]
        if vertex.suffix_link is None:
            if v == 0 or vertex.parent == 0:
                vertex.suffix_link = 0
            else:
                vertex.suffix_link = self.go(self.link(vertex.parent), vertex.parent_char)
        return vertex.suffix_link

    def exit_link(self, v):
        """Nearest leaf reachable through suffix links from ``v``, or None."""
        vertex = self.vertices[v]
        if not vertex.exit_link_known:
            if v == 0:
                vertex.exit_link = None
            else:
                target = self.link(v)
                if self.vertices[target].leaf:
                    vertex.exit_link = target
                else:
                    vertex.exit_link = self.exit_link(target)
            vertex.exit_link_known = True
        return vertex.exit_link

    def go(self, v, ch):
        """Automaton transition from vertex ``v`` on character ``ch``."""
        _check_char(ch)
        vertex = self.vertices[v]
        if ch not in vertex.transitions:
            if ch in vertex.children:
                target = vertex.children[ch]
            elif v == 0:
                target = 0
            else:
                target = self.go(self.link(v), ch)
            vertex.transitions[ch] = target
        return vertex.transitions[ch]