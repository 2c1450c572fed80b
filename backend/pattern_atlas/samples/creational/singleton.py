"""
Singleton

Every call to ``AppSettings()`` hands back the one shared instance, so a
value written through one reference is visible through all of them.
"""

import threading


class AppSettings:
    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        # Check again under the lock, another thread may have won the race
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance.values = {"theme": "light"}
                    cls._instance = instance
        return cls._instance

    def get(self, key, default=None):
        return self.values.get(key, default)

    def set(self, key, value) -> None:
        self.values[key] = value

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._instance = None


def demo(emit=print):
    AppSettings.reset()
    first = AppSettings()
    second = AppSettings()
    emit(f"Same instance: {first is second}")
    first.set("theme", "dark")
    emit(f"Theme seen through second reference: {second.get('theme')}")
    AppSettings.reset()
