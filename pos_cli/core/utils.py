import typer

from .session import load_session


def require_session() -> dict:
    """
    Returns the stored session or exits when nobody is logged in.
    """
    session = load_session()
    if session is None:
        typer.echo("No active session. Please login first.")
        raise typer.Exit(code=1)
    return session


def print_rows(rows: list, columns: list) -> None:
    """
    Prints rows as a fixed-width table. columns is a list of (key, title, width).
    """
    typer.echo("  ".join(f"{title:{width}}" for _, title, width in columns))
    typer.echo("-" * (sum(width for _, _, width in columns) + 2 * (len(columns) - 1)))
    for row in rows:
        typer.echo("  ".join(f"{str(row.get(key, ''))[:width]:{width}}" for key, _, width in columns))
