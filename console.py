# console.py
import click
from flask import current_app
from flask.cli import with_appcontext

from models import ErrorKind

MENU = """
--- Hotel Management Menu ---
1. Register guest
2. Reserve room
3. Cancel room reservation
4. Room service
5. View total bill
6. Show available rooms
7. Exit"""

EXIT_OPTION = 7


def show_available(desk):
    click.echo("Available rooms:")
    for room, features in desk.list_available_rooms().value:
        click.echo(str(room))
        click.echo(features)


def register_guest(desk):
    name = click.prompt("Enter the guest name", default="", show_default=False)
    phone = click.prompt("Enter the guest phone", default="", show_default=False)
    click.echo(desk.register_guest(name, phone).message)


def reserve_room(desk):
    guest_id = click.prompt("Enter the guest ID", type=int)
    found = desk.find_guest(guest_id)
    if not found.ok:
        click.echo(found.message)
        return
    show_available(desk)
    rno = click.prompt("Enter the ID of the room to reserve", type=int)
    result = desk.reserve_room(guest_id, rno)
    if result.error == ErrorKind.ALREADY_RESERVED:
        click.echo(f"Error: {result.message}")
    else:
        click.echo(result.message)


def cancel_reservation(desk):
    rno = click.prompt("Enter the ID of the room to cancel", type=int)
    click.echo(desk.cancel_reservation(rno).message)


def room_service(desk):
    rno = click.prompt("Enter the ID of the room for room service", type=int)
    found = desk.find_room(rno)
    if not found.ok:
        click.echo(found.message)
        return
    if found.value.is_available():
        # checked before asking for the amount
        click.echo("The room is not reserved. Room service cannot be added.")
        return
    amount = click.prompt("Enter the room service cost", type=float)
    click.echo(desk.add_room_service(rno, amount).message)


def view_bill(desk):
    rno = click.prompt("Enter the ID of the room to view the total bill", type=int)
    click.echo(desk.view_bill(rno).message)


ACTIONS = {
    1: register_guest,
    2: reserve_room,
    3: cancel_reservation,
    4: room_service,
    5: view_bill,
    6: show_available,
}


@click.command("menu")
@with_appcontext
def menu_command():
    """Run the interactive front desk menu."""
    desk = current_app.extensions["frontdesk"]
    while True:
        click.echo(MENU)
        raw = click.prompt("Select an option", default="", show_default=False)
        try:
            option = int(raw)
        except ValueError:
            click.echo("Invalid input. Try again.")
            continue

        if option == EXIT_OPTION:
            click.echo("Exiting the system. Goodbye!")
            break
        action = ACTIONS.get(option)
        if action is None:
            click.echo("Invalid option. Try again.")
            continue
        action(desk)


def init_app(app):
    app.cli.add_command(menu_command)
