from user_api.main import run

run()
