"""Protean Engine runner for Printeez.

Starts the Engine worker that processes events asynchronously:
- OutboxProcessor: polls the outbox table, publishes events to Redis Streams
- StreamSubscriptions: reads Redis Streams, invokes event handlers such as
  the order confirmation sender

Run it alongside the web workers with PROTEAN_ENV=production:
    python src/server.py
    python src/server.py --debug
"""

import argparse

from protean.server.engine import Engine


def _get_domain():
    """Import and initialize the Printeez domain."""
    from printeez.domain import printeez

    printeez.init()
    return printeez


def run(debug=False):
    engine = Engine(_get_domain(), debug=debug)
    engine.run()
    return engine.exit_code


def main():
    parser = argparse.ArgumentParser(description="Printeez Engine runner")
    parser.add_argument("--debug", action="store_true", help="Log every message the engine handles")
    args = parser.parse_args()

    raise SystemExit(run(debug=args.debug))


if __name__ == "__main__":
    main()
