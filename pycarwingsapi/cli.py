#!/usr/bin/python

"""Command line interface for Carwings API functions."""

import argparse
import asyncio
import configparser
import logging
import sys
from getpass import getpass
from pathlib import Path

from rich.console import Console

from pycarwingsapi.account import CarwingsAccount
from pycarwingsapi.connection import Connection
from pycarwingsapi.const import REGION_USA, REGIONS
from pycarwingsapi.exceptions import CarwingsExceptionError
from pycarwingsapi.update import PollingPolicy
from pycarwingsapi.utils import meters_to_miles
from pycarwingsapi.vehicle import CarwingsVehicle

vehicle_commands = {
    "battery": "Print the battery status stored by the service",
    "climate": "Print the climate control records stored by the service",
    "refresh": "Update the vehicle data, then print the battery status",
    "update": "Ask the vehicle for fresh data and wait until it is done",
}

console = Console()
printc = console.print

logging.basicConfig()
logging.root.setLevel(logging.WARNING)

_LOGGER = logging.getLogger(__name__)


def format_battery_status(status):
    """Turn a BatteryStatus into a dict suitable for printing."""
    return {
        "timestamp": status.timestamp.isoformat() if status.timestamp else None,
        "capacity": status.capacity,
        "remaining": status.remaining,
        "state_of_charge": f"{status.state_of_charge}%",
        "cruising_range_ac_on": f"{status.cruising_range_ac_on} m ({meters_to_miles(status.cruising_range_ac_on)} mi)",
        "cruising_range_ac_off": f"{status.cruising_range_ac_off} m ({meters_to_miles(status.cruising_range_ac_off)} mi)",
        "plugin_state": str(status.plugin_state),
        "charging_status": str(status.charging_status),
        "time_to_full": {
            "level1": str(status.time_to_full.level1),
            "level2": str(status.time_to_full.level2),
            "level2_at_6kw": str(status.time_to_full.level2_at_6kw),
        },
    }


async def battery(vehicle, _args):
    """Get the stored battery status."""
    return format_battery_status(await vehicle.get_battery_status())


async def climate(vehicle, _args):
    """Get the stored climate control records."""
    return await vehicle.get_climate_control_records()


async def refresh(vehicle, args):
    """Update the vehicle data and get the battery status."""
    status = await vehicle.get_battery_status(refresh=True, policy=args.policy)
    return format_battery_status(status)


async def update(vehicle, args):
    """Update the vehicle data."""
    result_key = await vehicle.update_status(args.policy)
    return {"result_key": result_key, "updated": True}


async def main(args):
    """Get arguments from parser and run command."""
    if args.debug:
        logging.root.setLevel(logging.DEBUG)

    username = args.username or input("Please enter Carwings username: ")
    password = args.password or getpass()
    args.policy = PollingPolicy(interval=args.poll_interval, max_attempts=args.poll_attempts)

    connection = Connection(debug=args.debug)
    account = CarwingsAccount(username, password, REGIONS.get(args.region, args.region), connection=connection)

    response = {}
    try:
        session = await account.connect()
        if args.command == "login":
            response = {
                "vin": session.vin,
                "region": session.region,
                "timezone": str(session.tz),
            }
        else:
            vehicle = CarwingsVehicle(session, connection)
            response = await globals()[args.func](vehicle, args)
    except CarwingsExceptionError as e:
        sys.exit(str(e))
    else:
        printc(response)
    finally:
        await connection.close()


def cli():
    """Get configuration parameters and command line arguments and run main loop."""
    config = configparser.ConfigParser()
    config["carwings"] = {
        "username": "",
        "password": "",
        "region": "usa",
        "poll_interval": "5",
        "poll_attempts": "24",
    }
    config.read([".carwings.cfg", Path("~/.carwings.cfg").expanduser()])
    parser = argparse.ArgumentParser(description="Carwings CLI")
    subparsers = parser.add_subparsers(help="command help", dest="command")

    parser.add_argument("-d", "--debug", dest="debug", action="store_true")
    parser.add_argument(
        "-u",
        "--username",
        dest="username",
        default=config.get("carwings", "username"),
    )
    parser.add_argument(
        "-p",
        "--password",
        dest="password",
        default=config.get("carwings", "password"),
    )
    parser.add_argument(
        "-r",
        "--region",
        dest="region",
        default=config.get("carwings", "region") or REGION_USA,
        help=f"One of {', '.join(REGIONS)} or a raw region code",
    )
    parser.add_argument(
        "--interval",
        dest="poll_interval",
        type=float,
        default=config.getfloat("carwings", "poll_interval"),
        help="Seconds between polls while updating",
    )
    parser.add_argument(
        "--attempts",
        dest="poll_attempts",
        type=int,
        default=config.getint("carwings", "poll_attempts"),
        help="Polls before giving up on an update",
    )

    subparsers.add_parser("login", help="Log in and show the bound vehicle")

    for vcmd, vdesc in vehicle_commands.items():
        parser_command = subparsers.add_parser(vcmd, help=vdesc)
        parser_command.set_defaults(func=vcmd)

    args = parser.parse_args()

    if args.command:
        asyncio.run(main(args))
    else:
        parser.print_help(sys.stderr)


if __name__ == "__main__":
    cli()
