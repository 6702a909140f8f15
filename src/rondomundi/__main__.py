from rondomundi.main import run

run()
