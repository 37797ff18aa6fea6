import getpass
import re
import typer

from pos_cli.core.session import save_session, clear_session, is_logged_in
from pos_cli.core.api import ApiError, api_login, api_register, api_get_user
from pos_cli.core.utils import require_session


app = typer.Typer(help="Account commands (register, login, logout, whoami)")

USERNAME_REGEX = re.compile(r"^[a-zA-Z0-9]+$")


def _prompt_username(username):
    if username is None:
        username = typer.prompt("Username")

    if not USERNAME_REGEX.match(username):
        typer.echo("Invalid username. Use only letters and numbers.")
        raise typer.Exit(code=1)
    return username


@app.command("register")
def register(
    username: str = typer.Option(None, "--username", "-u", help="Username (also your shop name)"),
):
    """
    Create a new account.
    """
    username = _prompt_username(username)

    password = getpass.getpass("Password: ")
    password_confirm = getpass.getpass("Confirm password: ")

    if password != password_confirm:
        typer.echo("Passwords do not match.")
        raise typer.Exit(code=1)

    if len(password) < 8:
        typer.echo("Password too short (minimum 8 characters).")
        raise typer.Exit(code=1)

    try:
        user = api_register(username, password)
    except ApiError as e:
        if e.status_code == 403:
            typer.echo(f"Username '{username}' is already taken.")
        else:
            typer.echo(f"Registration failed: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Account '{user['username']}' created. You can now login.")


@app.command("login")
def login(
    username: str = typer.Option(None, "--username", "-u", help="Username"),
):
    """
    Login to the backend. Only allowed if no session is active.
    """
    if is_logged_in():
        typer.echo("Session already active. Logout first to remove current session token.")
        raise typer.Exit(code=1)

    username = _prompt_username(username)
    password = getpass.getpass("Password: ")

    try:
        result = api_login(username, password)
    except ApiError as e:
        typer.echo(f"Login failed: {e}")
        raise typer.Exit(code=1)

    save_session(result["access_token"], result["user"]["username"], result["user"]["id"])
    typer.echo(f"Login successful as '{username}'.")


@app.command("logout")
def logout():
    """
    End session and delete local token.
    """
    clear_session()
    typer.echo("Session ended.")


@app.command("whoami")
def whoami():
    """
    Show the account behind the current session.
    """
    session = require_session()
    try:
        user = api_get_user(session["access_token"], session["username"])
    except ApiError as e:
        typer.echo(f"Failed to get account info: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Username:   {user['username']}")
    typer.echo(f"ID:         {user['id']}")
    typer.echo(f"Created at: {user['created_at']}")
