from typing import Dict, Optional


class KeyRepeatFilter:
    """
    Przepuszcza tylko pierwsze wciśnięcie trzymanego klawisza.

    Autorepeat na X11 przychodzi jako pary KeyRelease/KeyPress z tym samym
    znacznikiem czasu, na Windows/macOS jako same KeyPress bez KeyRelease.
    Puszczenie klawisza liczy się więc dopiero wtedy, gdy następne
    wciśnięcie ma inny czas niż puszczenie.
    """

    def __init__(self):
        # klawisz → czas ostatniego KeyRelease (None = wciąż trzymany)
        self._down: Dict[str, Optional[int]] = {}

    def press(self, key: str, time: int) -> bool:
        """True → nowe wciśnięcie, False → powtórzenie."""
        if key in self._down:
            released = self._down[key]
            if released is None or released == time:
                self._down[key] = None
                return False
        self._down[key] = None
        return True

    def release(self, key: str, time: int):
        if key in self._down:
            self._down[key] = time
