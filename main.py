import asyncio
import logging

from sqlalchemy.engine import make_url

from socialgraph.session import dispose_engine, get_database_url, init_db

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("socialgraph")


async def main():
    url = make_url(get_database_url())
    logger.info("Initialising schema at %s", url.render_as_string(hide_password=True))
    try:
        await init_db()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
