import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_stepper' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.core.errors import InvalidDimensions


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Stepper: step-by-step randomized DFS maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=25, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=25, help="Maze Height")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    mode = gen_parser.add_mutually_exclusive_group()
    mode.add_argument("--visual", action="store_true", help="Animate generation in a window")
    mode.add_argument("--record", action="store_true", help="Render generation offscreen to a video file")
    gen_parser.add_argument("--out", type=str, default=None,
                            help="Video path for --record (.mp4 or .avi, default: recordings/)")
    gen_parser.add_argument("--steps-per-frame", type=int, default=1, help="Generator steps per animation frame")
    gen_parser.add_argument("--fps", type=int, default=60, help="Frame rate of the window or video")
    gen_parser.add_argument("--glyphs", type=str, default=None,
                            help="Two characters for unvisited/visited cells in the text dump")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_stepper")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        if args.glyphs is not None and len(args.glyphs) != 2:
            parser.error("--glyphs takes exactly two characters")

        from maze_stepper.algo.dfs import MazeGenerator
        try:
            generator = MazeGenerator(args.width, args.height, seed=args.seed)
        except InvalidDimensions as e:
            logger.error(str(e))
            sys.exit(2)

        logger.info(f"Generating {args.width}x{args.height} maze (seed={args.seed})...")

        if args.visual:
            logger.info("Visual mode enabled - Opening window...")
            from maze_stepper.viz.renderer import Renderer
            renderer = Renderer(generator, steps_per_frame=max(1, args.steps_per_frame), fps=args.fps)
            renderer.init_window()
            renderer.run_loop()
        elif args.record:
            from maze_stepper.viz.recorder import GenerationRecorder
            out = args.out
            if not out:
                import datetime
                if not os.path.exists("recordings"):
                    os.makedirs("recordings")

                ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
                out = os.path.join("recordings", f"gen_dfs_{args.width}x{args.height}_{ts}.mp4")

            logger.info(f"Recording video to {out}")
            try:
                with GenerationRecorder(out, fps=args.fps) as recorder:
                    recorder.record(generator, steps_per_frame=max(1, args.steps_per_frame),
                                    hold_frames=args.fps)
            except (ValueError, OSError) as e:
                logger.error(str(e))
                sys.exit(1)
        else:
            logger.info("Headless generation...")
            generator.run_all()

        if args.glyphs:
            print(generator.grid.render(args.glyphs[0], args.glyphs[1]), end="")
        else:
            print(generator.render(), end="")
        print(f"cells={generator.visited_count}/{generator.total_cells} "
              f"carved={len(generator.carves)} steps={generator.step_count}")


if __name__ == "__main__":
    main()
