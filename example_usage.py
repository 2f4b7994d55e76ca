#!/usr/bin/env python3
"""
Basic usage examples for the OpenSearch client library.

This script demonstrates how to sign and run searches against an
OpenSearch app. Connection details come from the environment:

    OPENSEARCH_HOST, OPENSEARCH_APP, OPENSEARCH_KEY_ID, OPENSEARCH_KEY_SECRET
"""

import logging
import os
import sys

from opensearch_client import (
    OpenSearchClient,
    OpenSearchClientError,
    HTTPStatusError,
    RequestHeaders,
    SearchRequest,
    SortField,
    SortOrder,
    build_canonical_string
)


def load_settings():
    """Read connection settings from the environment."""
    names = ("OPENSEARCH_HOST", "OPENSEARCH_APP", "OPENSEARCH_KEY_ID", "OPENSEARCH_KEY_SECRET")
    missing = [name for name in names if not os.environ.get(name)]
    if missing:
        print(f"Missing environment variables: {', '.join(missing)}")
        sys.exit(1)
    return [os.environ[name] for name in names]


def main():
    """Run basic usage examples."""

    host, app_name, key_id, key_secret = load_settings()

    print("=== OpenSearch Python Client Basic Usage Examples ===\n")

    # Create client
    print("1. Creating client...")
    client = OpenSearchClient(host, app_name, key_id, key_secret)
    print(f"   Client created for: {host} (app {app_name})")
    print(f"   Key id: {key_id}\n")

    try:
        # Example 1: Inspect what gets signed
        print("2. Building a signed request...")
        request = SearchRequest(query="default:'apple'", hits=3)
        params = request.params()
        print(f"   Params: {params}")

        headers = RequestHeaders()
        canonical = build_canonical_string("GET", f"/v3/openapi/apps/{app_name}/search", params, headers)
        print("   Canonical string:")
        for line in canonical.split("\n"):
            print(f"     {line}")

        url, signed_headers = client.prepare(request)
        print(f"   URL: {url}")
        print(f"   Authorization: {signed_headers['Authorization']}")
        print()

        # Example 2: Simple search
        print("3. Running a simple search...")
        response = client.search(request)
        print(f"   Status: {response.status} (request {response.request_id})")
        print(f"   Total: {response.result.total}, returned: {response.result.num}")
        for item in response.result.items:
            print(f"   - {item.fields}")
        print()

        # Example 3: Search with every clause
        print("4. Running a filtered and sorted search...")
        request = SearchRequest(
            query="default:'apple'",
            start=0,
            hits=10,
            filter="price>100",
            sort_fields=[SortField("price", SortOrder.DESC), SortField("id", SortOrder.ASC)],
            fetch_fields=["id", "title", "price"]
        )
        print(f"   Request: {request}")
        response = client.search(request)
        print(f"   Status: {response.status}, hits: {response.result.num}")
        for error in response.errors:
            print(f"   ! {error.code}: {error.message}")
        print()

        # Example 4: Error handling demonstration
        print("5. Demonstrating error handling...")
        print("    Testing with wrong secret key...")
        with OpenSearchClient(host, app_name, key_id, "wrong-secret-key") as wrong_client:
            try:
                wrong_client.search(SearchRequest(query="default:'apple'"))
                print("    ✗ Wrong secret was accepted")
            except HTTPStatusError as e:
                print(f"    ✓ Correctly rejected wrong secret ({e.status_code})")
        print()

        print("=== All Examples Completed Successfully! ===")

    except OpenSearchClientError as e:
        print(f"OpenSearch Client Error: {e}")
        sys.exit(1)
    finally:
        # Clean up
        client.close()


def demonstrate_configuration():
    """Demonstrate client configuration options."""

    print("\n=== Configuration Options Example ===")

    host, app_name, key_id, key_secret = load_settings()
    client = OpenSearchClient(
        host,
        app_name,
        key_id,
        key_secret,
        timeout=60,           # 60 second HTTP timeout
        pool_size=16,         # response buffers kept for reuse
        chunk_size=16384      # body read chunk size
    )

    print("✓ Client configured with:")
    print(f"  - HTTP timeout: {client.config['timeout']} seconds")
    print(f"  - Buffer pool size: {client.config['pool_size']}")
    print(f"  - Read chunk size: {client.config['chunk_size']} bytes")

    client.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if os.environ.get("OPENSEARCH_DEBUG") else logging.INFO)
    main()
    demonstrate_configuration()
