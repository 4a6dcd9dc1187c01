from weekly_recs.jobs import app

if __name__ == "__main__":
    app()
