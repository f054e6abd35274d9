"""mst CLI main entry point."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer

from mst_engine.core.graph import Edge, Graph
from mst_engine.engine.aggregate import get_all_mst
from mst_engine.engine.config import MSTConfig
from mst_engine.engine.kruskal import kruskal
from mst_engine.engine.prim import PrimResult, compute_all_mst, prim
from mst_engine.engine.union_find import UnionFindStates, UnionFindStrategy
from mst_engine.engine.verify import check_spanning_tree
from mst_engine.errors import MSTError

app = typer.Typer(
    name="mst",
    help="Minimum spanning trees - Kruskal, Prim enumeration and Union-Find",
    no_args_is_help=True,
)

GraphPath = Annotated[
    Path,
    typer.Argument(help="Graph JSON file", exists=True, dir_okay=False, readable=True),
]
JsonFlag = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


def get_config(ctx: typer.Context) -> MSTConfig:
    """Get engine configuration from the global options."""
    return ctx.obj if isinstance(ctx.obj, MSTConfig) else MSTConfig()


def load_graph(path: Path) -> Graph:
    """Read a graph JSON file, exiting on malformed input."""
    try:
        return Graph.from_dict(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, ValueError, TypeError) as e:
        typer.secho(f"Error: invalid graph file {path}: {e}", fg=typer.colors.RED)
        raise typer.Exit(1) from e


def format_edge(graph: Graph, edge: Edge) -> str:
    return f"{graph.nodes[edge.source].label}-{graph.nodes[edge.target].label} ({edge.cost:g})"


def edge_rows(graph: Graph, edges: tuple[Edge, ...] | list[Edge]) -> list[list[Any]]:
    return [
        [graph.nodes[e.source].label, graph.nodes[e.target].label, e.cost] for e in edges
    ]


def prim_payload(graph: Graph, result: PrimResult) -> dict[str, Any]:
    return {
        "mst": edge_rows(graph, result.mst),
        "nodes": result.labels,
        "weight": result.weight,
    }


def output_result(data: dict[str, Any], as_json: bool = False) -> None:
    """Output result in appropriate format."""
    if as_json:
        typer.echo(json.dumps(data, indent=2, default=str))
        return

    for key, value in data.items():
        if isinstance(value, list) and value and isinstance(value[0], str):
            typer.echo(f"{key}: {' '.join(value)}")
        elif isinstance(value, list):
            typer.echo(f"{key}:")
            for item in value:
                typer.echo(f"  {item}")
        else:
            typer.echo(f"{key}: {value}")


def fail(error: Exception) -> NoReturn:
    typer.secho(f"Error: {error}", fg=typer.colors.RED)
    raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    strategy: Annotated[
        UnionFindStrategy,
        typer.Option("--strategy", "-s", help="Union-Find variant used by Kruskal"),
    ] = UnionFindStrategy.WEIGHTED,
    max_nodes: Annotated[
        int,
        typer.Option("--max-nodes", help="Refuse graphs with more nodes (0 = no limit)"),
    ] = 16,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Compute and enumerate minimum spanning trees of small graphs."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        ctx.obj = MSTConfig(union_find_strategy=strategy, max_nodes=max_nodes or None)
    except ValueError as e:
        fail(e)


@app.command("kruskal")
def kruskal_cmd(ctx: typer.Context, graph_path: GraphPath, as_json: JsonFlag = False) -> None:
    """Compute an MST with Kruskal and list the edges it rejected.

    Examples:
        mst kruskal graph.json
        mst --strategy quick-find kruskal graph.json --json
    """
    graph = load_graph(graph_path)
    try:
        result = kruskal(graph, get_config(ctx))
    except MSTError as e:
        fail(e)

    if as_json:
        output_result(
            {
                "mst": edge_rows(graph, result.mst),
                "cycle": edge_rows(graph, result.cycle),
                "weight": result.weight,
            },
            as_json=True,
        )
        return
    output_result(
        {
            "mst": [format_edge(graph, e) for e in result.mst],
            "rejected": [format_edge(graph, e) for e in result.cycle],
            "weight": f"{result.weight:g}",
        }
    )


@app.command("prim")
def prim_cmd(
    ctx: typer.Context,
    graph_path: GraphPath,
    start: Annotated[str, typer.Option("--start", help="Start node label")],
    all_runs: Annotated[
        bool,
        typer.Option("--all", "-a", help="Every distinct MST over weight ties"),
    ] = False,
    as_json: JsonFlag = False,
) -> None:
    """Run Prim from a start node, once or over every tie-break.

    Examples:
        mst prim graph.json --start A
        mst prim graph.json --start A --all --json
    """
    graph = load_graph(graph_path)
    config = get_config(ctx)
    try:
        results = compute_all_mst(graph, start, config) if all_runs else [prim(graph, start, config)]
    except MSTError as e:
        fail(e)

    if as_json:
        typer.echo(json.dumps([prim_payload(graph, r) for r in results], indent=2))
        return
    for i, result in enumerate(results):
        if len(results) > 1:
            typer.secho(f"[{i + 1}/{len(results)}]", fg=typer.colors.CYAN)
        output_result(
            {
                "order": " -> ".join(result.labels),
                "mst": [format_edge(graph, e) for e in result.mst],
                "weight": f"{result.weight:g}",
            }
        )


@app.command("count")
def count_cmd(ctx: typer.Context, graph_path: GraphPath, as_json: JsonFlag = False) -> None:
    """Count distinct MSTs reachable by Prim from any start node."""
    graph = load_graph(graph_path)
    try:
        results = get_all_mst(graph, get_config(ctx))
    except MSTError as e:
        fail(e)

    weight = results[0].weight if results else 0
    output_result({"count": len(results), "weight": weight}, as_json=as_json)


@app.command("check")
def check_cmd(
    ctx: typer.Context,
    graph_path: GraphPath,
    edges: Annotated[
        list[str],
        typer.Option("--edge", "-e", help="Selected edge as LABEL-LABEL (repeatable)"),
    ],
    as_json: JsonFlag = False,
) -> None:
    """Grade a proposed minimum spanning tree.

    Examples:
        mst check graph.json -e A-B -e B-C -e C-D
    """
    graph = load_graph(graph_path)
    selected: list[Edge] = []
    try:
        for raw in edges:
            a, sep, b = raw.partition("-")
            if not sep:
                raise ValueError(f"Edge must look like A-B, got '{raw}'")
            edge = graph.edge_between(a.strip(), b.strip())
            if edge is None:
                raise ValueError(f"No edge between {a} and {b}")
            selected.append(edge)
        verdict = check_spanning_tree(graph, selected, get_config(ctx))
    except (MSTError, ValueError) as e:
        fail(e)

    data = {
        "is_spanning_tree": verdict.is_spanning_tree,
        "is_minimal": verdict.is_minimal,
        "weight": verdict.weight,
        "minimal_weight": verdict.minimal_weight,
    }
    if as_json:
        output_result(data, as_json=True)
        return
    if verdict.is_minimal:
        typer.secho("Correct: minimum spanning tree", fg=typer.colors.GREEN)
    elif verdict.is_spanning_tree:
        typer.secho(
            f"Spanning tree, but weight {verdict.weight:g} > {verdict.minimal_weight:g}",
            fg=typer.colors.YELLOW,
        )
    else:
        typer.secho("Not a spanning tree", fg=typer.colors.RED)


@app.command("union-find")
def union_find_cmd(
    size: Annotated[int, typer.Argument(help="Number of elements")],
    unions: Annotated[
        list[str],
        typer.Option("--union", "-u", help="Union as I-J (repeatable, applied in order)"),
    ],
    strategy: Annotated[
        UnionFindStrategy,
        typer.Option("--strategy", "-s", help="Union-Find variant"),
    ] = UnionFindStrategy.QUICK_FIND,
    either_direction: Annotated[
        bool,
        typer.Option("--either-direction", help="Keep states for union(i, j) and union(j, i)"),
    ] = False,
    as_json: JsonFlag = False,
) -> None:
    """Show the Union-Find state(s) after a sequence of unions.

    Examples:
        mst union-find 8 -u 0-1 -u 2-3
        mst union-find 8 -s weighted -u 0-1 -u 1-2 --either-direction
    """
    try:
        states = UnionFindStates(size, strategy)
        for raw in unions:
            i, sep, j = raw.partition("-")
            if not sep:
                raise ValueError(f"Union must look like I-J, got '{raw}'")
            states.union(int(i), int(j), either_direction=either_direction)
    except (MSTError, ValueError) as e:
        fail(e)

    if as_json:
        typer.echo(json.dumps(states.states()))
        return
    typer.echo(f"index: {' '.join(str(i) for i in range(size))}")
    for state in states.states():
        typer.echo(f"value: {' '.join(str(v) for v in state)}")


if __name__ == "__main__":
    app()
