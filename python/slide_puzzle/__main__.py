from slide_puzzle.main import app

app(prog_name="slide-puzzle")
