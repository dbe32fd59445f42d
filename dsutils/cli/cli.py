"""
cli.py - interactive shell over a Trie and a Graph
Features:
- Bulk loading of a word list (one word per line) into the trie
- Bulk loading of a CSV edge list (source,target[,weight]) into the graph
- Slash commands for prefix queries, removal, BFS/DFS and shortest paths
- Uses Rich for tables and formatting
"""

import argparse
import csv
import logging
import shlex
from typing import Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from dsutils.core.graph import Graph, GraphNode
from dsutils.core.trie import Trie
from dsutils.utils.config_manager import Config, check_weight
from dsutils.utils.logger_utils import setup_logging, time_block

logger = logging.getLogger(__name__)

HELP = [
    ("/add <word>...", "insert words into the trie"),
    ("/search <word>", "exact word lookup"),
    ("/prefix [p]", "list words starting with p"),
    ("/remove <word>", "delete a word (prunes dead nodes)"),
    ("/words", "list every stored word"),
    ("/edge <a> <b> [w]", "add directed edge a -> b"),
    ("/bfs <a>", "breadth-first order from a"),
    ("/dfs <a>", "depth-first order from a"),
    ("/path <a> <b>", "cheapest path from a to b"),
    ("/nodes", "list graph nodes and out-degree"),
    ("/config [key val]", "show or change settings"),
    ("/quit", "leave"),
]


class DSShell:
    """Command shell holding one Trie and one Graph of named nodes."""

    def __init__(self, config: Optional[Config] = None, console: Optional[Console] = None):
        self.cfg = config or Config()
        self.console = console or Console()
        self.trie = Trie()
        self.graph: Graph[str] = Graph()
        self._by_name: Dict[str, GraphNode[str]] = {}
        self.running = True

    # LOADING -------------------------------------------------------------------
    def load_words(self, path: str) -> int:
        """Insert every non-blank line of `path`. Returns the number of lines read."""
        with time_block(f"load words from {path}", logger):
            with open(path, "r", encoding="utf8") as f:
                words = [ln.strip() for ln in f if ln.strip()]
            self.trie.insert_many(words)
        return len(words)

    def load_edges(self, path: str) -> int:
        """
        Read `source,target[,weight]` rows; '#' lines and blank rows are skipped.
        Returns the number of edges added.
        """
        count = 0
        with time_block(f"load edges from {path}", logger):
            with open(path, "r", encoding="utf8", newline="") as f:
                for lineno, row in enumerate(csv.reader(f), 1):
                    row = [c.strip() for c in row]
                    if not row or not row[0] or row[0].startswith("#"):
                        continue
                    if len(row) < 2 or not row[1]:
                        raise ValueError(f"{path}:{lineno}: expected source,target[,weight]")
                    weight = self._weight(row[2]) if len(row) > 2 and row[2] else None
                    self.add_edge(row[0], row[1], weight)
                    count += 1
        return count

    # GRAPH HELPERS -------------------------------------------------------------
    def node(self, name: str, create: bool = False) -> GraphNode[str]:
        n = self._by_name.get(name)
        if n is None:
            if not create:
                raise KeyError(f"Unknown node: {name}")
            n = self._by_name[name] = self.graph.add_node(name)
        return n

    def add_edge(self, a: str, b: str, weight: Optional[float] = None) -> None:
        if weight is None:
            weight = self.cfg.get("default_weight")
        self.graph.add_edge(self.node(a, create=True), self.node(b, create=True), weight)

    @staticmethod
    def _weight(s: str) -> float:
        return check_weight(s)

    # COMMAND HANDLING -----------------------------------------------------------
    def execute(self, line: str):
        """
        Run one command line and return what should be shown (a Rich
        renderable, or None). Errors become a red Text instead of raising.
        """
        try:
            parts = shlex.split(line)
        except ValueError as e:
            return self._error(str(e))
        if not parts:
            return None
        cmd, args = parts[0].lower(), parts[1:]

        handler = getattr(self, "_cmd_" + cmd.lstrip("/"), None)
        if not cmd.startswith("/") or handler is None:
            return self._error(f"Unknown command: {cmd} (try /help)")
        try:
            return handler(args)
        except (KeyError, ValueError, OSError) as e:
            logger.debug("command %r failed: %s", line, e)
            msg = e.args[0] if isinstance(e, KeyError) and e.args else str(e)
            return self._error(str(msg))

    def _error(self, msg: str) -> Text:
        return Text(msg, style="red")

    def _usage(self, usage: str):
        raise ValueError(f"usage: {usage}")

    # trie commands
    def _cmd_add(self, args: List[str]):
        if not args:
            self._usage("/add <word>...")
        before = len(self.trie)
        self.trie.insert_many(args)
        return Text(f"added {len(self.trie) - before} new word(s)", style="green")

    def _cmd_search(self, args: List[str]):
        if len(args) != 1:
            self._usage("/search <word>")
        if self.trie.search(args[0]):
            return Text(f"{args[0]}: found", style="green")
        if self.trie.starts_with(args[0]):
            return Text(f"{args[0]}: prefix only", style="yellow")
        return Text(f"{args[0]}: not found", style="dim")

    def _cmd_prefix(self, args: List[str]):
        if len(args) > 1:
            self._usage("/prefix [p]")
        prefix = args[0] if args else ""
        found = self.trie.get_words_with_prefix(prefix)
        return self._word_table(f"Words starting with {prefix!r}", found)

    def _cmd_words(self, args: List[str]):
        return self._word_table("Stored words", self.trie.words())

    def _cmd_remove(self, args: List[str]):
        if len(args) != 1:
            self._usage("/remove <word>")
        if self.trie.remove(args[0]):
            return Text(f"removed {args[0]}", style="green")
        return Text(f"{args[0]} not stored", style="dim")

    # graph commands
    def _cmd_edge(self, args: List[str]):
        if len(args) not in (2, 3):
            self._usage("/edge <a> <b> [w]")
        weight = self._weight(args[2]) if len(args) == 3 else None
        self.add_edge(args[0], args[1], weight)
        w = self.node(args[0]).neighbors[self.node(args[1])]
        return Text(f"{args[0]} -> {args[1]} ({w:g})", style="green")

    def _cmd_bfs(self, args: List[str]):
        if len(args) != 1:
            self._usage("/bfs <a>")
        return self._order_text("BFS", self.graph.bfs(self.node(args[0])))

    def _cmd_dfs(self, args: List[str]):
        if len(args) != 1:
            self._usage("/dfs <a>")
        return self._order_text("DFS", self.graph.dfs(self.node(args[0])))

    def _cmd_path(self, args: List[str]):
        if len(args) != 2:
            self._usage("/path <a> <b>")
        path = self.graph.find_shortest_path(self.node(args[0]), self.node(args[1]))
        if path is None:
            return Text(f"no path from {args[0]} to {args[1]}", style="yellow")
        total = self.graph.path_weight(path)
        return Panel(
            " -> ".join(n.value for n in path),
            title="Shortest path",
            subtitle=f"weight {total:g}",
            border_style="cyan",
        )

    def _cmd_nodes(self, args: List[str]):
        table = Table(title="Graph nodes", box=box.SIMPLE)
        table.add_column("Node", style="bold")
        table.add_column("Out", justify="right", style="magenta")
        table.add_column("Targets", style="dim")
        for n in self.graph.nodes:
            targets = ", ".join(f"{t.value}({w:g})" for t, w in n.neighbors.items())
            table.add_row(n.value, str(len(n.neighbors)), targets)
        return table

    # misc
    def _cmd_config(self, args: List[str]):
        if len(args) == 2:
            self.cfg.set(args[0], args[1])
            if args[0] == "log_level":
                logging.getLogger("dsutils").setLevel(self.cfg.get("log_level").upper())
        elif args:
            self._usage("/config [key val]")
        table = Table(title="Config", box=box.MINIMAL)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for k, v in self.cfg.show():
            table.add_row(k, str(v))
        return table

    def _cmd_help(self, args: List[str]):
        table = Table(title="Commands", box=box.SIMPLE, show_edge=False)
        table.add_column("Command", style="cyan")
        table.add_column("Description")
        for c, d in HELP:
            table.add_row(c, d)
        return table

    def _cmd_quit(self, args: List[str]):
        self.running = False
        return Text("bye.", style="dim")

    _cmd_exit = _cmd_quit

    # DISPLAY -------------------------------------------------------------------
    def _word_table(self, title: str, found: List[str]) -> Table:
        if self.cfg.get("sort_results"):
            found = sorted(found)
        limit = self.cfg.get("max_results")
        table = Table(title=title, box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        for i, w in enumerate(found[:limit], 1):
            table.add_row(str(i), w)
        if len(found) > limit:
            table.caption = f"{len(found) - limit} more not shown"
        return table

    def _order_text(self, label: str, order: List[GraphNode[str]]) -> Text:
        return Text(f"{label}: " + " ".join(n.value for n in order))

    # LOOP ----------------------------------------------------------------------
    def run(self):
        self.console.rule("[bold magenta]dsutils[/bold magenta]")
        self.console.print(
            f"[dim]{len(self.trie)} word(s), {len(self.graph)} node(s). /help for commands.[/dim]"
        )
        while self.running:
            try:
                line = Prompt.ask("[green]ds[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                break
            out = self.execute(line)
            if out is not None:
                self.console.print(out)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dsutils", description="Trie and graph playground")
    p.add_argument("--words", help="text file, one word per line")
    p.add_argument("--edges", help="CSV file of source,target[,weight] rows")
    p.add_argument("--config", default="dsutils.json", help="JSON settings file")
    p.add_argument("--log-level", help="override log_level from config")
    p.add_argument("--log-file", help="also write logs to this file")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    try:
        setup_logging(args.log_level or cfg.get("log_level"), args.log_file)
    except (OSError, ValueError) as e:
        Console().print(f"[red]Logging setup failed:[/red] {e}")
        return 1

    shell = DSShell(cfg)
    try:
        if args.words:
            n = shell.load_words(args.words)
            shell.console.print(f"[dim]loaded {n} word(s) from {args.words}[/dim]")
        if args.edges:
            n = shell.load_edges(args.edges)
            shell.console.print(f"[dim]loaded {n} edge(s) from {args.edges}[/dim]")
    except (OSError, ValueError) as e:
        shell.console.print(f"[red]Load failed:[/red] {e}")
        return 1
    shell.run()
    return 0
