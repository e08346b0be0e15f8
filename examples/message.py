"""Send an informational message and print the service's answer."""

import logging

from rollbar_reporter import Client, Level


def main():
  logging.basicConfig(level=logging.INFO)
  client = Client.from_env()

  future = client.build_report().from_message("hai").with_level(Level.INFO).send()
  status = future.result(timeout=10)
  if status is not None:
    print(status.code, status.description())


if __name__ == "__main__":
  main()
