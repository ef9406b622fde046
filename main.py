#This file is for development purposes only

import logging
import os

from ghi_client_impl import GhiError, get_client


def main():
    logging.basicConfig(level=os.environ.get("GHI_LOG_LEVEL", "WARNING").upper())
    client = get_client(interactive=True)

    print(f"\nFetching open issues for {client.owner}/{client.repository}...")
    try:
        for issue in client.list_issues():
            print(f"- {issue}")
    except GhiError as e:
        print(f"Error talking to the issue service ({e.kind.value}): {e}")

    try:
        issue = client.show(1)
        print(f"- {issue}")
    except GhiError as e:
        print(f"Error talking to the issue service ({e.kind.value}): {e}")

if __name__ == "__main__":
    main()
