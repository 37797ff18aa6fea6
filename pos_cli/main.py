# pos_cli/main.py


import typer
from pos_cli.auth.commands import app as auth_app
from pos_cli.products.commands import app as products_app
from pos_cli.menus.commands import app as menus_app
from pos_cli.orders.commands import app as orders_app

app = typer.Typer(help="Command-line client for the POS backend.")
app.add_typer(auth_app, name="auth")
app.add_typer(products_app, name="products")
app.add_typer(menus_app, name="menus")
app.add_typer(orders_app, name="orders")

if __name__ == "__main__":
    app()
