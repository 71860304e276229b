"""Sitecore Item Web API CLI."""
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(
    name="sitecore-webapi",
    help="Sitecore Item Web API CLI",
    add_completion=False
)
console = Console()


def _print_failure(response) -> None:
    console.print(f"[red]{response.status_code} {response.status_description or ''}[/red]")
    if response.info and response.info.error_message:
        console.print(f"[red]{escape(response.info.error_message)}[/red]")
    error_message = getattr(response, 'error_message', None)
    if error_message:
        console.print(f"[red]{escape(error_message)}[/red]")


@app.command()
def read(
    host: str = typer.Argument(..., help="Sitecore host name"),
    item_id: Optional[str] = typer.Option(None, "--item-id", "-i", help="Item ID"),
    path: Optional[str] = typer.Option(None, "--path", "-p", help="Content path"),
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Sitecore query"),
    database: Optional[str] = typer.Option(None, "--database", "-d", help="Database name"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language"),
    response_format: str = typer.Option("json", "--format", "-f", help="json or xml"),
    username: Optional[str] = typer.Option(None, "--username", "-u", help="User name"),
    password: Optional[str] = typer.Option(None, "--password", help="Password"),
    encrypt: bool = typer.Option(False, "--encrypt", help="Encrypt credential headers"),
    secure: bool = typer.Option(False, "--secure", help="Use https"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Read items and print them as a table."""
    from sitecore_webapi import (
        SitecoreDataContext, AuthenticatedSitecoreDataContext, SitecoreCredentials,
        ItemQuery, ResponseFormat, PublicKeyError, SitecoreException, setup_logging
    )

    if verbose:
        logging.basicConfig()
        setup_logging(logging.DEBUG)

    try:
        fmt = ResponseFormat(response_format.lower())
    except ValueError:
        console.print(f"[red]Unknown format: {response_format}[/red]")
        raise typer.Exit(2)

    item_query = ItemQuery(
        item_id=item_id,
        item_path=path,
        query=query,
        database=database,
        language=language,
        response_format=fmt
    )

    try:
        if username:
            if password is None:
                password = typer.prompt("Password", hide_input=True)
            credentials = SitecoreCredentials(username, password, encrypt_headers=encrypt)
            context = AuthenticatedSitecoreDataContext(host, credentials, is_secure=secure)
        else:
            context = SitecoreDataContext(host, is_secure=secure)
    except SitecoreException as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)

    with context:
        try:
            response = context.get_response(item_query)
        except PublicKeyError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(1)

    if not response.succeeded:
        _print_failure(response)
        raise typer.Exit(1)

    table = Table(title=f"{response.result_count} of {response.total_count} items")
    table.add_column("ID", style="cyan")
    table.add_column("Path")
    table.add_column("Template")
    table.add_column("Version", justify="right")

    for item in response.items:
        table.add_row(
            item.item_id or '',
            item.path or '',
            item.template or '',
            str(item.version) if item.version is not None else ''
        )

    console.print(table)
    if response.info and response.info.response_time is not None:
        console.print(f"[dim]{response.info.uri} in {response.info.response_time:.3f}s[/dim]")


@app.command("public-key")
def public_key(
    host: str = typer.Argument(..., help="Sitecore host name"),
    secure: bool = typer.Option(False, "--secure", help="Use https"),
):
    """Fetch the RSA public key used for header encryption."""
    from sitecore_webapi import SitecoreDataContext, SitecoreException

    try:
        context = SitecoreDataContext(host, is_secure=secure)
    except SitecoreException as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)

    with context:
        key = context.get_public_key()

    if key is None:
        console.print("[red]Server did not return a valid public key[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]Modulus:[/bold]  {key.modulus}")
    console.print(f"[bold]Exponent:[/bold] {key.exponent}")


def main():
    app()


if __name__ == "__main__":
    main()
