from cardlist.main import run

run()
