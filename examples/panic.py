"""
Report uncaught exceptions.

The division below is never caught: the handler reports it, then the
default hook prints the traceback. The interpreter waits for the report
thread before exiting.
"""

import logging

from rollbar_reporter import Client, report_panics


def main():
  logging.basicConfig(level=logging.INFO)
  client = Client.from_env()
  report_panics(client)

  zero = int("0")
  print(42 / zero)


if __name__ == "__main__":
  main()
