"""Report a plain value as an error, with the current call stack."""

import logging

from rollbar_reporter import Client, report_error_message


def main():
  logging.basicConfig(level=logging.INFO)
  client = Client.from_env()
  print(report_error_message(client, "＿|￣|○").result(timeout=10))


if __name__ == "__main__":
  main()
