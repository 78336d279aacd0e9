"""
Per-scenario capture of browser console messages.

Attach in setUp, detach in tearDown. Messages never leak between
scenarios because each capture owns its own list.
"""

from collections import defaultdict


class ConsoleCapture:
    """Records ``console`` events from one Playwright page, grouped by type."""

    def __init__(self, page):
        self.page = page
        self._messages = defaultdict(list)
        self._attached = False

    def _on_console(self, message):
        self._messages[message.type].append(message.text)

    def attach(self):
        if not self._attached:
            self.page.on("console", self._on_console)
            self._attached = True
        return self

    def detach(self):
        if self._attached:
            self.page.remove_listener("console", self._on_console)
            self._attached = False

    def clear(self):
        self._messages.clear()

    def messages(self, message_type=None):
        """All captured texts, or only those of ``message_type`` ('error', 'warning', ...)."""
        if message_type is not None:
            return list(self._messages.get(message_type, []))
        return [text for texts in self._messages.values() for text in texts]

    @property
    def errors(self):
        return self.messages("error")

    def __enter__(self):
        return self.attach()

    def __exit__(self, exc_type, exc, tb):
        self.detach()
        return False
