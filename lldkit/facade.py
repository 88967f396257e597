"""A laptop power switch that hides its boot checks behind one call."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field


class MotherBoard:
    def check_on_boot(self) -> bool:
        print(" MotherBoard status on ")
        return True


class Ram:
    def check_on_boot(self) -> bool:
        print(" RAM status on ")
        return True


class OsCheck:
    def check_on_boot(self) -> bool:
        print(" OS status on ")
        return True


class DriverCheck:
    def check_on_boot(self) -> bool:
        print(" Driver status on ")
        return True


@dataclass
class HardwareChecks:
    """Checks the motherboard, then the memory."""

    motherboard: MotherBoard = field(default_factory=MotherBoard)
    ram: Ram = field(default_factory=Ram)

    def check_all(self) -> bool:
        return self.motherboard.check_on_boot() and self.ram.check_on_boot()


@dataclass
class SoftwareChecks:
    """Checks the drivers, then the operating system."""

    driver: DriverCheck = field(default_factory=DriverCheck)
    os_check: OsCheck = field(default_factory=OsCheck)

    def check_all(self) -> bool:
        return self.driver.check_on_boot() and self.os_check.check_on_boot()


@dataclass
class LaptopSwitch:
    """Runs every check and reports whether the laptop starts."""

    software: SoftwareChecks = field(default_factory=SoftwareChecks)
    hardware: HardwareChecks = field(default_factory=HardwareChecks)

    def switch_on(self) -> bool:
        if self.software.check_all() and self.hardware.check_all():
            print(" Laptop is opening ")
            return True
        print(" Error opening Laptop")
        return False


def main(argv: list[str] | None = None) -> int:
    """Switch a laptop on."""
    argparse.ArgumentParser(description="Facade demonstration.").parse_args(argv)
    LaptopSwitch().switch_on()
    return 0