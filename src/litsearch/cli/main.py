"""CLI application using Typer for building literature search strategies."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from ..config.settings import settings
from ..core.errors import LitSearchError
from ..extraction import extract_scored_terms
from ..io.corpus import corpus_texts, keyword_fields, load_corpus, read_lines, write_lines
from ..network import build_feature_matrix, create_network, find_cutoff, get_keywords, importance_table, reduce_graph
from ..search import check_recall, remove_redundancies, write_search, write_title_search
from ..utils.logging import get_logger

app = typer.Typer(
    name="litsearch",
    help="Build reproducible Boolean search strategies from a naive literature search",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def _fail(exc: Exception) -> None:
    console.print(f"[red]Error: {exc}[/red]")
    raise typer.Exit(1)


def _split(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def load_groups(path: Path) -> List[List[str]]:
    """Read concept groups from YAML.

    Accepts a list of term lists, a mapping of group name to terms, or either
    of those under a top-level ``groups`` key.
    """
    data: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    if isinstance(data, dict) and "groups" in data:
        data = data["groups"]
    if isinstance(data, dict):
        data = list(data.values())
    if not isinstance(data, list):
        raise typer.BadParameter(f"{path} does not contain a list or mapping of concept groups")
    groups: List[List[str]] = []
    for group in data:
        if isinstance(group, str):
            group = [group]
        groups.append([str(term) for term in group or []])
    return groups


@app.command()
def terms(
    corpus: Path = typer.Argument(..., help="Corpus file (csv, tsv, json, jsonl)", exists=True),
    method: str = typer.Option("fakerake", "--method", "-m", help="rake, fakerake, tagged or ngram"),
    fields: str = typer.Option("title,abstract", "--fields", help="Comma-separated text fields"),
    min_freq: int = typer.Option(settings.min_freq, "--min-freq", help="Minimum corpus frequency"),
    min_n: int = typer.Option(settings.min_n, "--min-n", help="Shortest term in words"),
    max_n: int = typer.Option(settings.max_n, "--max-n", help="Longest term in words"),
    ngrams: bool = typer.Option(True, "--ngrams/--no-ngrams", help="Apply the word-count bounds"),
    language: str = typer.Option(settings.default_language, "--language", "-l", help="Stopword language"),
    stopword_file: Optional[Path] = typer.Option(None, "--stopwords", help="Stopword file, one per line"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write terms, one per line"),
    top: int = typer.Option(25, "--top", help="Rows shown in the table"),
):
    """Extract candidate search terms from a corpus."""
    try:
        documents = load_corpus(corpus)
        if method == "tagged":
            texts = keyword_fields(documents)
        else:
            texts = corpus_texts(documents, _split(fields))
        stopwords = read_lines(stopword_file) if stopword_file else None
        scored = extract_scored_terms(
            texts,
            method=method,
            min_freq=min_freq,
            ngrams=ngrams,
            min_n=min_n,
            max_n=max_n,
            language=language,
            stopwords=stopwords,
        )
    except LitSearchError as exc:
        _fail(exc)

    table = Table(title=f"Candidate terms ({len(scored)})")
    table.add_column("Term", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Frequency", style="green", justify="right")
    for item in scored[:top]:
        table.add_row(item.term, f"{item.score:.2f}", str(item.frequency))
    console.print(table)
    if output:
        write_lines([item.term for item in scored], output)
        console.print(f"Saved: {output}")


@app.command()
def keywords(
    corpus: Path = typer.Argument(..., help="Corpus file", exists=True),
    term_file: Path = typer.Argument(..., help="Candidate terms, one per line", exists=True),
    min_studies: int = typer.Option(settings.min_studies, "--min-studies", help="Minimum documents per term"),
    min_occ: int = typer.Option(settings.min_occ, "--min-occ", help="Minimum shared documents per edge"),
    method: str = typer.Option("cumulative", "--method", "-m", help="cumulative, changepoint, knee or spline"),
    imp_method: str = typer.Option("strength", "--importance", help="strength or degree"),
    percent: float = typer.Option(settings.cutoff_percent, "--percent", help="Importance share kept (cumulative)"),
    knot_num: int = typer.Option(settings.knot_num, "--knots", help="Change points or spline knots"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write keywords, one per line"),
):
    """Build the co-occurrence network and keep the important terms."""
    try:
        documents = load_corpus(corpus)
        matrix = build_feature_matrix(documents, read_lines(term_file))
        graph = create_network(matrix, min_studies=min_studies, min_occ=min_occ)
        cutoffs = find_cutoff(graph, method=method, imp_method=imp_method, percent=percent, knot_num=knot_num)
        reduced = reduce_graph(graph, cutoffs[0], imp_method=imp_method)
        kept = get_keywords(reduced, imp_method=imp_method)
    except LitSearchError as exc:
        _fail(exc)

    console.print(f"Network: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges")
    console.print(f"Cutoff candidates: {', '.join(f'{c:g}' for c in cutoffs)} (using {cutoffs[0]:g})")
    table = Table(title=f"Retained keywords ({len(kept)})")
    table.add_column("Rank", justify="right")
    table.add_column("Term", style="cyan")
    table.add_column("Strength", justify="right")
    table.add_column("Degree", justify="right")
    table.add_column("Studies", style="green", justify="right")
    for row in importance_table(reduced, imp_method=imp_method).itertuples(index=False):
        table.add_row(str(row.rank), row.term, f"{row.strength:g}", str(row.degree), str(row.studies))
    console.print(table)
    if output:
        write_lines(kept, output)
        console.print(f"Saved: {output}")


@app.command()
def search(
    groups_file: Path = typer.Argument(..., help="YAML file with concept groups", exists=True),
    languages: str = typer.Option(settings.default_language, "--languages", help="Comma-separated languages"),
    stemming: bool = typer.Option(False, "--stemming/--no-stemming", help="Truncate English terms to stems"),
    closure: str = typer.Option("none", "--closure", help="none, left, right or full"),
    exactphrase: bool = typer.Option(False, "--exact/--no-exact", help="Quote multi-word terms"),
    dedupe: bool = typer.Option(False, "--remove-redundant", help="Drop terms covered by a stemmed wildcard"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write searches as Markdown"),
):
    """Write the Boolean search string for each language."""
    groups = load_groups(groups_file)
    try:
        if dedupe:
            groups = remove_redundancies(groups)
        searches = write_search(
            groups,
            languages=_split(languages),
            stemming=stemming,
            closure=closure,
            exactphrase=exactphrase,
        )
    except LitSearchError as exc:
        _fail(exc)

    for language, query in searches.items():
        console.print(f"[bold blue]{language}[/bold blue]")
        console.print(query, markup=False, highlight=False)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            f.write("# Search Strategy\n\n")
            for language, query in searches.items():
                f.write(f"## {language}\n\n```\n{query}\n```\n\n")
        console.print(f"Saved: {output}")


@app.command()
def titles(
    title_file: Path = typer.Argument(..., help="Known-relevant titles, one per line", exists=True),
):
    """Write a title search to check that a database indexes known articles."""
    try:
        query = write_title_search(read_lines(title_file))
    except LitSearchError as exc:
        _fail(exc)
    console.print(query, markup=False, highlight=False)


@app.command()
def recall(
    gold_file: Path = typer.Argument(..., help="Gold-standard titles, one per line", exists=True),
    corpus: Path = typer.Argument(..., help="Retrieved corpus file", exists=True),
    threshold: float = typer.Option(settings.recall_threshold, "--threshold", help="Similarity threshold (0-1)"),
):
    """Check which gold-standard titles a search retrieved."""
    try:
        retrieved = [doc.title for doc in load_corpus(corpus)]
        result = check_recall(read_lines(gold_file), retrieved, threshold=threshold)
    except LitSearchError as exc:
        _fail(exc)

    summary: Dict[str, Any] = {
        "matched": len(result.matched),
        "unmatched": len(result.unmatched),
        "recall": f"{result.recall:.1%}",
    }
    table = Table(title="Recall Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    for key, value in summary.items():
        table.add_row(key, str(value))
    console.print(table)
    for title in result.unmatched:
        console.print(f"[yellow]Not found:[/yellow] {title}")


if __name__ == "__main__":
    app()
