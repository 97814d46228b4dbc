"""CLI commands for the pizza storefront."""

from __future__ import annotations

import click

from classroom.application.add_to_cart import AddToCartHandler
from classroom.application.confirm_order import ConfirmOrderHandler
from classroom.application.dto import CartDTO
from classroom.application.pizza_session import PizzaSession
from classroom.application.remove_item import RemoveItemHandler
from classroom.application.select_option import SelectOptionHandler
from classroom.application.show_cart import ShowCartHandler
from classroom.application.show_menu import ShowMenuHandler
from classroom.application.update_quantity import UpdateQuantityHandler
from classroom.domain.exceptions import DomainException, EntityNotFoundError
from classroom.domain.model.pizza import Crust, Size
from classroom.domain.service.pricing import describe_selection
from classroom.infrastructure.bootstrap import pizza_session

SIZE_CHOICES = click.Choice([s.value for s in Size], case_sensitive=False)
CRUST_CHOICES = click.Choice([c.value for c in Crust], case_sensitive=False)


def _resolve_pizza(session: PizzaSession, name: str) -> int:
    index = session.catalog.get_by_name(name)
    if index is None:
        raise EntityNotFoundError(f"Pizza not found: '{name}'")
    return index


def _parse_item(raw: str) -> tuple[str, Size | None, Crust | None, str | None]:
    """Parse 'Cheese:large:thick:2' (everything after the name optional)."""
    parts = [part.strip() for part in raw.split(":")]
    if not parts[0] or len(parts) > 4:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'Pizza[:size[:crust[:qty]]]'."
        )
    size = Size.parse(parts[1]) if len(parts) > 1 and parts[1] else None
    crust = Crust.parse(parts[2]) if len(parts) > 2 and parts[2] else None
    qty = parts[3] if len(parts) > 3 else None
    return parts[0], size, crust, qty


def _display_menu(session: PizzaSession) -> None:
    rows = ShowMenuHandler(session).handle()
    click.echo(f"  {'#':<3} {'Pizza':<12} {'Base':>8} {'Selected':<16} {'Price':>8}")
    click.echo(f"  {'-'*51}")
    for row in rows:
        selected = f"{row.size}/{row.crust}"
        click.echo(
            f"  {row.index:<3} {row.name:<12} {row.base_price:>8} {selected:<16} {row.unit_price:>8}"
        )
        click.echo(f"      {row.description}")


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart."""
    if not dto.items:
        click.echo("Your cart is empty")
    else:
        click.echo(f"  {'ID':<4} {'Pizza':<12} {'Qty':>4} {'Price':>8} {'Total':>9}")
        click.echo(f"  {'-'*41}")
        for item in dto.items:
            click.echo(
                f"  {item.id:<4} {item.name:<12} {item.quantity:>4} {item.unit_price:>8} {item.line_total:>9}"
            )
            click.echo(f"       {item.details}")
        click.echo(f"  {'-'*41}")
    click.echo(f"Total: {dto.total}")


@click.command("menu")
def pizza_menu() -> None:
    """List the pizzas on the menu."""
    _display_menu(pizza_session())


@click.command("price")
@click.option("--pizza", "name", required=True, help="Pizza name.")
@click.option("--size", default=Size.SMALL.value, show_default=True, type=SIZE_CHOICES)
@click.option("--crust", default=Crust.REGULAR.value, show_default=True, type=CRUST_CHOICES)
def pizza_price(name: str, size: str, crust: str) -> None:
    """Show the price of one pizza with the given options."""
    session = pizza_session()
    try:
        index = _resolve_pizza(session, name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    pizza = session.catalog.get_by_index(index)
    chosen_size, chosen_crust = Size.parse(size), Crust.parse(crust)
    SelectOptionHandler(session).handle(index, size=chosen_size, crust=chosen_crust)
    row = ShowMenuHandler(session).handle()[index]

    click.echo(f"{row.name}: {row.unit_price}")
    click.echo(describe_selection(pizza.base_price, chosen_size, chosen_crust))


@click.command("order")
@click.option(
    "--item",
    "items",
    required=True,
    multiple=True,
    help="Pizza as 'Name[:size[:crust[:qty]]]'. Repeat for more pizzas.",
)
@click.option("--no-confirm", is_flag=True, default=False, help="Show the cart without ordering.")
def pizza_order(items: tuple[str, ...], no_confirm: bool) -> None:
    """Fill a cart and confirm the order."""
    session = pizza_session()

    try:
        for raw in items:
            name, size, crust, qty = _parse_item(raw)
            index = _resolve_pizza(session, name)
            SelectOptionHandler(session).handle(index, size=size, crust=crust)
            line = AddToCartHandler(session).handle(index)
            if qty is not None:
                UpdateQuantityHandler(session).handle(line.id, qty)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(ShowCartHandler(session).handle())
    if no_confirm:
        return

    message = ConfirmOrderHandler(session).handle()
    if message:
        click.echo()
        click.echo(message)


_SHOP_HELP = """Commands:
  menu                      show the menu with current selections
  size ROW SIZE             pick small | medium | large for a menu row
  crust ROW CRUST           pick regular | thin | thick for a menu row
  add ROW                   add a menu row to the cart
  qty ID N                  change the quantity of a cart item
  rm ID                     remove a cart item
  cart                      show the cart
  confirm                   place the order
  quit                      leave"""


def _int_arg(args: list[str], position: int, label: str) -> int:
    try:
        return int(args[position])
    except (IndexError, ValueError):
        raise click.BadParameter(f"{label} must be a whole number")


def _run_shop_command(session: PizzaSession, command: str, args: list[str]) -> None:
    if command == "menu":
        _display_menu(session)
    elif command == "size":
        value = args[1] if len(args) > 1 else ""
        SelectOptionHandler(session).handle(_int_arg(args, 0, "ROW"), size=Size.parse(value))
    elif command == "crust":
        value = args[1] if len(args) > 1 else ""
        SelectOptionHandler(session).handle(_int_arg(args, 0, "ROW"), crust=Crust.parse(value))
    elif command == "add":
        line = AddToCartHandler(session).handle(_int_arg(args, 0, "ROW"))
        click.echo(f"Added #{line.id} {line.name} at {line.unit_price}")
    elif command == "qty":
        raw = args[1] if len(args) > 1 else ""
        UpdateQuantityHandler(session).handle(_int_arg(args, 0, "ID"), raw)
    elif command == "rm":
        RemoveItemHandler(session).handle(_int_arg(args, 0, "ID"))
    elif command == "cart":
        _display_cart(ShowCartHandler(session).handle())
    elif command == "confirm":
        message = ConfirmOrderHandler(session).handle()
        click.echo(message if message else "Nothing to order yet.")
    else:
        click.echo(_SHOP_HELP)


@click.command("shop")
def pizza_shop() -> None:
    """Interactive storefront session."""
    session = pizza_session()
    click.echo(_SHOP_HELP)

    while True:
        try:
            line = click.prompt("pizza", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            break

        words = line.split()
        if not words:
            continue
        command, args = words[0].lower(), words[1:]
        if command in ("quit", "exit"):
            break

        try:
            _run_shop_command(session, command, args)
        except (DomainException, click.BadParameter) as exc:
            click.echo(f"Error: {exc}", err=True)
