import asyncio
import logging
import os

from tempy_email import TempyEmailClient, TempyEmailError, load_client_config

# Configure logging level from environment
log_level = os.getenv("TEMPY_LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format='[%(asctime)s] [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    force=True  # Force reconfiguration to avoid duplicate handlers
)


async def run_demo() -> int:
    """
    Create a mailbox, wait for one message and print what it carries.

    Environment variables:
      TEMPY_CONFIG - Path to config.ini file (see tempy_email.config)
      TEMPY_LOG_LEVEL - Logging level (default: INFO)
      TEMPY_WAIT_FOR - What to extract: "otp" (default) or "link"
      TEMPY_SENDER - Only accept messages whose sender contains this text
      TEMPY_DEMO_TIMEOUT_MS - How long to wait (default: 60000)
    """
    config = load_client_config()
    client = TempyEmailClient(config=config)
    wait_for = os.getenv("TEMPY_WAIT_FOR", "otp").strip().lower()
    sender = os.getenv("TEMPY_SENDER") or None
    timeout_ms = float(os.getenv("TEMPY_DEMO_TIMEOUT_MS", "60000"))

    mailbox = await client.create_mailbox()
    print(f"Mailbox created: {mailbox.address}")
    print(f"Seconds remaining: {mailbox.seconds_remaining()}")
    print(f"Send an email to {mailbox.address} ({timeout_ms / 1000:.0f}s timeout)...")

    try:
        if wait_for == "link":
            value = await mailbox.wait_for_link(sender=sender, timeout_ms=timeout_ms)
        else:
            value = await mailbox.wait_for_otp(sender=sender, timeout_ms=timeout_ms)
        print(f"{wait_for.upper()}: {value}")
        return 0
    except TempyEmailError as exc:
        print(f"Failed ({exc.code}): {exc}")
        return 1
    finally:
        await mailbox.delete()


if __name__ == "__main__":
    raise SystemExit(asyncio.run(run_demo()))
