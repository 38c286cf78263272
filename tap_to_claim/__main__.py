"""
__main__.py
-----------
Entry point: ``python -m tap_to_claim`` or the ``tap-to-claim`` script.
"""

from tap_to_claim.core.runtime.main_loop import MainLoop


def main():
    MainLoop().run()


if __name__ == "__main__":
    main()
