"""
Render the whole F1 management front end to a static HTML file from a running API.
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

from client import views
from client.api_client import F1ApiClient
from client.store import ClientStore
from config.app_config import AppConfig

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


async def build_site(api_url: str, output: Path) -> Path:
    async with F1ApiClient(base_url=api_url) as api:
        store = ClientStore(api)
        await store.load_all()
        admin_table = views.render_admin_table(await api.list_drivers())

    sections = views.render_sections(store.driver_standings, store.team_standings, store.races)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(views.render_page(sections, admin_table=admin_table), encoding="utf-8")
    logger.info("Wrote %s", output)
    return output


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--api-url", default=AppConfig.API_URL)
    parser.add_argument("--output", type=Path, default=Path("site") / "index.html")
    args = parser.parse_args()
    try:
        asyncio.run(build_site(args.api_url, args.output))
    except Exception:
        logger.exception("Site build failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
