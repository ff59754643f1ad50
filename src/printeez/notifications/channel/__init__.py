"""Email channel registry.

Uses the in-memory fake adapter by default; ``EMAIL_BACKEND=smtp`` switches
to real delivery through the configured SMTP server.
"""

from printeez import config

_channel_instances: dict[str, object] = {}


def get_channel(backend: str | None = None):
    """Return the email adapter for ``backend`` (singleton per backend).

    Args:
        backend: "fake" or "smtp". Defaults to ``config.EMAIL_BACKEND``.
    """
    backend = (backend or config.EMAIL_BACKEND).lower()
    if backend not in _channel_instances:
        if backend == "fake":
            from printeez.notifications.channel.fake_email import FakeEmailAdapter

            _channel_instances[backend] = FakeEmailAdapter()
        elif backend == "smtp":
            from printeez.notifications.channel.smtp_email import SmtpEmailAdapter

            _channel_instances[backend] = SmtpEmailAdapter(
                host=config.EMAIL_HOST,
                port=config.EMAIL_PORT,
                username=config.EMAIL_USER,
                password=config.EMAIL_PASS,
                sender=config.EMAIL_FROM,
            )
        else:
            raise ValueError(f"Unknown email backend: {backend}")

    return _channel_instances[backend]


def reset_channels():
    """Reset all channel singletons (useful for testing)."""
    _channel_instances.clear()
