from trip_planner.main import run

run()
