"""Contoh: mengisi form presensi tanpa browser.

Sesi wizard berjalan di atas LocalGateway (service langsung, tanpa Flask) atau,
bila API_BASE_URL diberikan lewat argumen ``--http``, lewat REST API.
"""

import argparse
import asyncio
import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.presensi.presensi.container import build_container
from src.presensi.presensi.core.enums import UserType
from src.presensi.presensi.core.logging import setup_logging
from src.presensi.presensi.gateway.http_gateway import HttpGateway
from src.presensi.presensi.wizard.session import WizardSession
from src.presensi.presensi.wizard.view import build_step_view


async def check_in(gateway, settings, nip: str) -> None:
    session = WizardSession(
        gateway,
        debounce_seconds=settings.DEBOUNCE_SECONDS,
        on_notify=lambda note: print(f"[{note.level.value}] {note.title}: {note.description}"),
    )
    activities = await session.start()
    if not activities:
        print("Tidak ada kegiatan aktif.")
        return

    session.select_user_type(UserType.INTERNAL)
    session.set_identifier(nip)
    await session.wait_idle()
    if not session.advance():
        print(build_step_view(session))
        return

    session.advance()
    session.select_activity(activities[0].activity_id)
    while not session.is_last_step and session.advance():
        pass

    print(build_step_view(session))
    record = await session.submit()
    if record is not None:
        print(record.to_dict())
    await session.close()


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("nip", nargs="?", default="123456789")
    parser.add_argument("--http", action="store_true", help="talk to API_BASE_URL instead of the local services")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(settings.LOG_LEVEL)

    async def run():
        if args.http:
            async with HttpGateway(settings.API_BASE_URL, timeout=settings.HTTP_TIMEOUT_SECONDS) as gateway:
                await check_in(gateway, settings, args.nip)
        else:
            container = build_container(db_config=settings.DB_CONFIG, form_base_url=settings.FORM_BASE_URL)
            await check_in(container.local_gateway(), settings, args.nip)

    asyncio.run(run())


if __name__ == "__main__":
    main()
