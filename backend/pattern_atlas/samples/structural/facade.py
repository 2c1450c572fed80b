"""
Facade

Starting a computer touches the CPU, memory and disk in a fixed order.
``ComputerFacade.start()`` gives clients one call instead.
"""

from typing import List


class CPU:
    def freeze(self) -> str:
        return "CPU: freeze"

    def jump(self, address: int) -> str:
        return f"CPU: jump to {address:#06x}"

    def execute(self) -> str:
        return "CPU: execute"


class Memory:
    def load(self, address: int, data: str) -> str:
        return f"Memory: load '{data}' at {address:#06x}"


class HardDrive:
    def read(self, sector: int, size: int) -> str:
        return f"boot sector {sector} ({size} bytes)"


class ComputerFacade:
    BOOT_ADDRESS = 0x7C00

    def __init__(self):
        self.cpu = CPU()
        self.memory = Memory()
        self.disk = HardDrive()

    def start(self) -> List[str]:
        data = self.disk.read(0, 512)
        return [
            self.cpu.freeze(),
            self.memory.load(self.BOOT_ADDRESS, data),
            self.cpu.jump(self.BOOT_ADDRESS),
            self.cpu.execute(),
        ]


def demo(emit=print):
    for step in ComputerFacade().start():
        emit(step)
