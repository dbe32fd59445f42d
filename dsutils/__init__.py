"""
dsutils

Graph and trie data structures with a small Rich shell on top.
 - core: Graph/GraphNode (BFS, DFS, Dijkstra), Trie/TrieNode
 - utils: JSON config and logging helpers
 - cli: interactive shell (`dsutils` / `python -m dsutils`)
"""

from .core import Graph, GraphNode, InvalidNodeError, Trie, TrieNode

__all__ = ["Graph", "GraphNode", "InvalidNodeError", "Trie", "TrieNode"]

__version__ = "0.1.0"
