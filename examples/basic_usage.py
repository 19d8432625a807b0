#!/usr/bin/env python3
"""Basic usage example"""

from timber import Timber, DebugTree, TimberConfig


def main():
    # Plant a console tree
    Timber.plant(DebugTree(config=TimberConfig.debug_config()))

    # Log messages
    Timber.debug("debug")
    Timber.info("info")
    Timber.warn("warn")
    Timber.error("error")

    # One-time tags, consumed by the next call
    Timber.tag("tag1").debug("debug")
    Timber.tag("tag2").info("info")
    Timber.tag("tag3").warn("warn")
    Timber.tag("tag4").error("error")

    # Extra values follow the message
    Timber.info("Requests served:", 42)

    Timber.uproot_all()


if __name__ == "__main__":
    main()
