"""
Seed categories through the HTTP API.

Reads categories.json (a list of {"name": ...}) and creates each one with
POST /categories, sending the API key. Configure API_BASE_URL and API_KEY
in .env.
"""
import asyncio
import json
import logging
import os
import sys

import httpx
from dotenv import load_dotenv

logger = logging.getLogger("upload_via_api")

API_KEY_HEADER = "X-API-Key"


async def upload_categories(
    base_url: str, api_key: str, path: str = "categories.json", transport: httpx.AsyncBaseTransport = None
) -> int:
    """Create every category listed in ``path``. Returns how many were created."""
    try:
        with open(path, "r") as f:
            categories_data = json.load(f)
    except FileNotFoundError:
        logger.error(f"{path} not found. Please ensure it's in the project root.")
        return 0

    created = 0
    async with httpx.AsyncClient(
        base_url=base_url, headers={API_KEY_HEADER: api_key}, transport=transport
    ) as client:
        # The list endpoint doubles as a reachability and credentials check.
        try:
            response = await client.get("/categories")
            response.raise_for_status()
        except (httpx.RequestError, httpx.HTTPStatusError) as e:
            logger.error(f"API check failed at {base_url}/categories: {e}")
            return 0

        for cat_data in categories_data:
            name = cat_data.get("name", "")
            try:
                response = await client.post("/categories", json={"name": name})
            except httpx.RequestError as e:
                logger.error(f"Error creating category '{name}': {e}")
                continue

            body = response.json()
            if body.get("code") == 200:
                created += 1
                logger.info(f"Created category '{name}' with id {body['data']['id']}")
            else:
                logger.warning(f"Category '{name}' rejected: {body.get('status')} {body.get('data')}")

    logger.info(f"Upload finished: {created}/{len(categories_data)} categories created.")
    return created


def main() -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    base_url = os.getenv("API_BASE_URL")
    api_key = os.getenv("API_KEY")
    if not base_url or not api_key:
        logger.error("API_BASE_URL and API_KEY must be set (e.g. API_BASE_URL=http://localhost:3000/api).")
        return 1

    asyncio.run(upload_categories(base_url, api_key))
    return 0


if __name__ == "__main__":
    sys.exit(main())
