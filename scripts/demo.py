#!/usr/bin/env python3
"""
Demo script for the café directory.

Runs the sample requests against the app in-process and prints the
status and body of each response.
"""

from fastapi.testclient import TestClient

from cafe_directory.api.app import app


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def run_requests(client: TestClient, requests: list[dict[str, str]]) -> None:
    """Send GET /cafe for each parameter set and print the outcome."""
    for params in requests:
        response = client.get("/cafe", params=params)
        body = response.text or "<empty>"
        print(f"  {response.status_code}  {params}\n       -> {body}")


def main() -> None:
    """Run the demo."""
    with TestClient(app) as client:
        print_section("Supported cities")
        print(f"  {', '.join(client.get('/cities').json()['cities'])}")

        print_section("Successful lookups")
        run_requests(
            client,
            [
                {"city": "moscow", "count": "2"},
                {"city": "tula"},
                {"city": "moscow", "search": "ложка"},
                {"city": "moscow", "search": "КОФЕ"},
                {"city": "moscow", "count": "0"},
            ],
        )

        print_section("Rejected lookups")
        run_requests(
            client,
            [
                {},
                {"city": "omsk"},
                {"city": "tula", "count": "na"},
                {"city": "tula", "count": "-1"},
            ],
        )


if __name__ == "__main__":
    main()
