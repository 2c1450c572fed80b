"""
Proxy

``LazyImageProxy`` stands in for an expensive ``RealImage`` and only loads
it the first time it is displayed. Later calls reuse the loaded image.
"""

from typing import Optional, Protocol


class Image(Protocol):
    def display(self) -> str:
        ...


class RealImage:
    loads = 0

    def __init__(self, filename: str):
        self.filename = filename
        RealImage.loads += 1

    def display(self) -> str:
        return f"Displaying {self.filename}"


class LazyImageProxy:
    def __init__(self, filename: str):
        self.filename = filename
        self._image: Optional[RealImage] = None

    @property
    def loaded(self) -> bool:
        return self._image is not None

    def display(self) -> str:
        if self._image is None:
            self._image = RealImage(self.filename)
        return self._image.display()


def demo(emit=print):
    RealImage.loads = 0
    image = LazyImageProxy("holiday.png")
    emit(f"Proxy created, loads so far: {RealImage.loads}")
    emit(image.display())
    emit(image.display())
    emit(f"Loads after two displays: {RealImage.loads}")
