"""Main CLI interface using Typer."""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from .. import __version__
from ..core import ClusterDumper
from ..k8s import K8sClient
from ..model.export import DumpOptions, DumpResult, ExportFormat
from ..utils.logger import configure_logging, get_logger

# Create CLI app
app = typer.Typer(
    name="kube-dump",
    help="Dump all Kubernetes resources as individual files",
    add_completion=True,
)

console = Console()
logger = get_logger(__name__)


def _print_version():
    console.print(f"[bold]kube-dump[/bold] version {__version__}")


@app.command()
def dump(
    config: Optional[str] = typer.Option(
        None,
        "--config",
        envvar="CONFIG",
        help="Path to the kubeconfig (default: kubectl's own lookup, in-cluster config included)",
    ),
    context: Optional[str] = typer.Option(
        None, "--context", "-c", envvar="CONTEXT", help="Context from the kubeconfig"
    ),
    output: Path = typer.Option(
        "dump", "--dir", "-d", envvar="DIR", help="Output directory for the dumps"
    ),
    resources: str = typer.Option(
        "",
        "--resources",
        envvar="RESOURCES",
        help="Resources to dump (e.g. 'configmaps,secrets'), empty for all",
    ),
    ignore_resources: str = typer.Option(
        "",
        "--ignore-resources",
        envvar="IGNORE_RESOURCES",
        help="Resources to ignore (e.g. 'configmaps,secrets')",
    ),
    namespaces: str = typer.Option(
        "",
        "--namespaces",
        envvar="NAMESPACES",
        help="Namespaces to dump (e.g. 'ns1,ns2'), empty for all",
    ),
    ignore_namespaces: str = typer.Option(
        "",
        "--ignore-namespaces",
        envvar="IGNORE_NAMESPACES",
        help="Namespaces to ignore (e.g. 'ns1,ns2')",
    ),
    clusterscoped: bool = typer.Option(
        True,
        "--clusterscoped/--no-clusterscoped",
        envvar="CLUSTERSCOPED",
        help="Dump cluster-wide resources",
    ),
    namespaced: bool = typer.Option(
        True, "--namespaced/--no-namespaced", envvar="NAMESPACED", help="Dump namespaced resources"
    ),
    stateless: bool = typer.Option(
        True,
        "--stateless/--no-stateless",
        envvar="STATELESS",
        help="Remove fields containing a state of the resource",
    ),
    threads: int = typer.Option(
        10, "--threads", "-t", envvar="THREADS", help="Maximum number of threads (minimum 1)"
    ),
    verbosity: int = typer.Option(
        1, "--verbosity", "-v", envvar="VERBOSITY", min=0, max=3, help="Verbosity of the output (0-3)"
    ),
    format: ExportFormat = typer.Option(
        ExportFormat.YAML, "--format", "-f", envvar="FORMAT", help="Output format for object files"
    ),
):
    """Dump every listable object of the cluster into a directory tree."""
    configure_logging(verbosity)

    if verbosity > 1:
        _print_version()

    try:
        options = DumpOptions(
            output_dir=output,
            resources=resources,
            ignore_resources=ignore_resources,
            namespaces=namespaces,
            ignore_namespaces=ignore_namespaces,
            clusterscoped=clusterscoped,
            namespaced=namespaced,
            stateless=stateless,
            threads=threads,
            export_format=format,
        )
    except ValidationError as e:
        if any(err["loc"] == ("threads",) for err in e.errors()):
            console.print("[red]Error:[/red] minimum number of threads is 1")
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        client = K8sClient(kubeconfig=config, context=context)

        with console.status("[bold green]Dumping Kubernetes resources...") as status:

            def _progress(result: DumpResult):
                status.update(
                    f"[bold green]Dumping Kubernetes resources...[/bold green] "
                    f"{result.written} manifests written"
                )

            dumper = ClusterDumper(client, options, progress_callback=_progress)
            result = dumper.dump()

    except Exception as e:
        logger.debug("dump aborted", exc_info=True)
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)

    if verbosity > 0:
        console.print(
            f"loaded [green]{result.written}[/green] manifests in {result.elapsed:.3f}s"
        )


@app.command()
def version():
    """Show version information."""
    _print_version()
    console.print("Point-in-time export of Kubernetes resources to individual files")


if __name__ == "__main__":
    app()
