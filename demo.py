import asyncio, aioconsole, logging, pocketcube, argparse, time, typing
from view import CubeView

def parse_args(argv: typing.Optional[typing.List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("-m", "--max-states", type=int, default=None, help="Abort a solve after discovering this many states")
    parser.add_argument("-s", "--state", default=None, help="Initial state as 24 color letters in U L F R B D order")
    return parser.parse_args(argv)

async def run_solver(solver: pocketcube.Solver, cube: pocketcube.CubeState) -> typing.Optional[typing.List[pocketcube.Turn]]:
    print("Solving...")
    start_time = time.time()
    try:
        #The search is synchronous, keep the prompt alive while it runs
        solution = await asyncio.to_thread(solver.solve, cube)
    except pocketcube.SolverError as e:
        print(f"Solver failed: {e}")
        return None

    print(f"Solution ({len(solution)} turns, {time.time() - start_time:.2f}s): {pocketcube.format_turns(solution) or '<already solved>'}")
    return solution

async def command_loop(cube: pocketcube.CubeState, solver: pocketcube.Solver):
    view: CubeView = None
    solution: typing.List[pocketcube.Turn] = None

    def apply_turns(turns: typing.List[pocketcube.Turn]):
        cube.apply(turns)
        if view and not view.has_exit: view.update_state(cube)

    try:
        while True:
            line = (await aioconsole.ainput("> ")).strip()
            cmd, _, arg = line.partition(" ")
            cmd = cmd.lower()
            if cmd == "h" or cmd == "help":
                print("(h)elp:          Shows this help text")
                print("(q)uit:          Exits the demo")
                print("(s)how:          Prints the current cube state")
                print("(t)urn <moves>:  Applies turns, e.g. \"t R U R' U'\"")
                print("(r)scramble [n]: Applies n random turns (default 8)")
                print("(x) solve:       Computes a shortest solution for the current state")
                print("(a)pply:         Applies the last computed solution")
                print("reset:           Resets the cube to the solved state")
                print("(v)iew:          Opens a window showing the cube net which updates in real time")
                print("(d)ebug:         Toggles debug logging")
            elif cmd == "q" or cmd == "quit":
                print("Exiting...")
                break
            elif cmd == "s" or cmd == "show":
                print(cube.net)
                print(f"state:  {cube}")
                print(f"solved: {cube.is_solved}")
            elif cmd == "t" or cmd == "turn":
                try: turns = pocketcube.parse_turns(arg)
                except pocketcube.InvalidTurnError as e:
                    print(e)
                    continue
                apply_turns(turns)
                print(f"Applied {pocketcube.format_turns(turns)}")
            elif cmd == "r" or cmd == "scramble":
                try: length = int(arg) if arg else 8
                except ValueError:
                    print(f"Invalid scramble length: {arg}")
                    continue
                turns = pocketcube.random_scramble(length)
                apply_turns(turns)
                print(f"Scramble: {pocketcube.format_turns(turns)}")
            elif cmd == "x" or cmd == "solve":
                solution = await run_solver(solver, cube.copy())
            elif cmd == "a" or cmd == "apply":
                if solution is None:
                    print("No solution computed yet")
                    continue
                apply_turns(solution)
                print(f"Applied {pocketcube.format_turns(solution)}, solved: {cube.is_solved}")
                solution = None
            elif cmd == "reset":
                cube = pocketcube.CubeState.solved()
                if view and not view.has_exit: view.update_state(cube)
                print("Cube reset")
            elif cmd == "v" or cmd == "view":
                if not view or view.has_exit:
                    def view_turn_cb(turn: pocketcube.Turn):
                        apply_turns([turn])
                        pocketcube.LOGGER.log(logging.INFO, f"view turn {turn} -> {cube}")

                    view, _ = await CubeView.run_thread(view_turn_cb)
                    view.update_state(cube)
            elif cmd == "d" or cmd == "debug":
                if pocketcube.LOGGER.level != logging.DEBUG:
                    pocketcube.LOGGER.setLevel(logging.DEBUG)
                    print("Enabled debug logging")
                else:
                    pocketcube.LOGGER.setLevel(logging.INFO)
                    print("Disabled debug logging")
            elif cmd: print("Unknown command")
    finally:
        if view: view.close_threadsafe()

async def main(args: argparse.Namespace):
    cube = pocketcube.CubeState.from_string(args.state) if args.state else pocketcube.CubeState.solved()
    solver = pocketcube.Solver(args.max_states)

    print("Pocket cube:")
    print(cube.net)
    await command_loop(cube, solver)

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    args = parse_args()
    if args.debug: pocketcube.LOGGER.setLevel(logging.DEBUG)

    asyncio.run(main(args))
