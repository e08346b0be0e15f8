"""
Report a caught exception.

Run with ROLLBAR_ACCESS_TOKEN set (and optionally ROLLBAR_ENVIRONMENT).
"""

import logging

from rollbar_reporter import Client, report_error


def main():
  logging.basicConfig(level=logging.INFO)
  client = Client.from_env()

  try:
    int("笑")
  except ValueError as exc:
    # Waiting is only needed because the script ends right after.
    status = report_error(client, exc).result(timeout=10)
    print(status)

  # `report_error` is shorthand for:
  #
  #   client.build_report()
  #       .from_error(exc)
  #       .with_backtrace(exc.__traceback__)
  #       .with_frame(FrameBuilder().with_line_number(line).build())
  #       .send()


if __name__ == "__main__":
  main()
