#!/usr/bin/env python3
"""
Metrics collection for the Discord Command Logger plugin.
"""

import threading


class Metrics:
    """Collection of metrics counters."""

    def __init__(self):
        # Incremented from the host thread and the webhook loop thread
        self._lock = threading.Lock()
        self.reset()

    def reset(self):
        """Zero all counters."""
        with self._lock:
            self.commands_seen_total = 0
            self.commands_skipped_total = 0
            self.posts_published_total = 0
            self.post_failures_total = 0

    def increment_commands_seen(self):
        """Increment commands seen counter."""
        with self._lock:
            self.commands_seen_total += 1

    def increment_commands_skipped(self):
        """Increment commands skipped counter (toggle off or empty command)."""
        with self._lock:
            self.commands_skipped_total += 1

    def increment_posts_published(self):
        """Increment posts published counter."""
        with self._lock:
            self.posts_published_total += 1

    def increment_post_failures(self):
        """Increment failed webhook deliveries counter."""
        with self._lock:
            self.post_failures_total += 1

    def snapshot(self) -> dict:
        with self._lock:
            return {
                "commands_seen_total": self.commands_seen_total,
                "commands_skipped_total": self.commands_skipped_total,
                "posts_published_total": self.posts_published_total,
                "post_failures_total": self.post_failures_total,
            }

# Global metrics instance
metrics = Metrics()
