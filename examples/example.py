"""Example code for using the pycarwingsapi library."""

import asyncio
import contextlib
import logging
from sys import argv

from pycarwingsapi.account import CarwingsAccount
from pycarwingsapi.connection import Connection
from pycarwingsapi.update import PollingPolicy
from pycarwingsapi.utils import meters_to_miles
from pycarwingsapi.vehicle import CarwingsVehicle

logging.basicConfig()

# Invoke like this: python ./examples/example.py <your username> <your password> <region code>
# By default the root logger is set to WARNING and all loggers you define
# inherit that value. Here we set the root logger to NOTSET. This logging
# level is automatically inherited by all existing and new sub-loggers
# that do not set a less verbose level.

logging.root.setLevel(logging.DEBUG)

username = argv[1]
password = argv[2]
region = argv[3] if len(argv) > 3 else "NNA"


async def battery() -> None:
    """Refresh the vehicle data and print out state of charge and range."""
    conn = Connection()
    account = CarwingsAccount(username, password, region, connection=conn)

    session = await account.connect()
    vehicle = CarwingsVehicle(session, conn)
    status = await vehicle.get_battery_status(
        refresh=True,
        policy=PollingPolicy(interval=10, max_attempts=30),
    )
    print(
        f"VIN: {vehicle.vin}, SoC: {status.state_of_charge}%, "
        f"Range: {meters_to_miles(status.cruising_range_ac_off)} mi, "
        f"Plug: {status.plugin_state}, Charging: {status.charging_status}",
    )

    await conn.close()


if __name__ == "__main__":
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    with contextlib.suppress(KeyboardInterrupt):
        loop.run_until_complete(battery())
