from datetime import datetime


def log(string: str):
    time = datetime.now().time()
    print(f"[{time.strftime('%H:%M:%S')}] {string}")
