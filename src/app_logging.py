import sys

# stdout carries frame reports only; status lines go to stderr


def log_info(msg):
    sys.stderr.write(f"[INFO] {msg}\n")
    sys.stderr.flush()


def log_warn(msg):
    sys.stderr.write(f"[WARN] {msg}\n")
    sys.stderr.flush()


def log_err(msg):
    sys.stderr.write(f"[ERROR] {msg}\n")
    sys.stderr.flush()


def log_report(text):
    sys.stdout.write(f"{text}\n")
    sys.stdout.flush()
