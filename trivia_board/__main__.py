from trivia_board.app import run

if __name__ == "__main__":
    run()
