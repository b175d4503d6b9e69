# Console output helpers: timestamped log lines and an in-place progress line
import time


def timestamp() -> str:
    return time.strftime("%H:%M:%S")


# drop-in helper for progress and log line
def progress_print(msg: str) -> None:
    # overwrite same line, no newline
    print(f"\r\033[K{msg}", end="", flush=True)


def log_print(msg: str) -> None:
    # first terminate the progress line, then print normally
    print("\r\033[K", end="", flush=True)
    print(f"[{timestamp()}] {msg}", flush=True)
