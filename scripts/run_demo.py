#!/usr/bin/env python3
"""Render a turtle drawing demo to PNG frames without a display."""

import logging
import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from turtle_world import RasterCanvas, Surface, SurfaceConfig


def draw_square(surface):
    t = surface.create_turtle("square")
    t.color("darkgreen", "lightgreen")
    t.begin_fill()
    for _ in range(4):
        t.forward(150).right(90)
    t.end_fill()
    t.penup().goto(-75, -60).pendown()
    t.write("square", align="center", font=("Arial", 14, "bold"))


def draw_race(surface):
    """Two turtles whose commands interleave in enqueue order."""
    red = surface.create_turtle("red")
    blue = surface.create_turtle("blue")
    red.color("red").shape("turtle")
    blue.color("blue").shape("turtle")
    red.penup().goto(-200, 60).pendown()
    blue.penup().goto(-200, -60).pendown()
    red.speed("fast")
    blue.speed("slow")
    for _ in range(4):
        red.forward(100).dot()
        blue.forward(100).dot()


def draw_spiral(surface):
    t = surface.create_turtle("spiral")
    surface.bgcolor("black")
    t.speed("fastest")
    t.pensize(2)
    colors = ["red", "orange", "yellow", "green", "cyan", "violet"]
    for i in range(90):
        t.pencolor(colors[i % len(colors)])
        t.forward(i * 3).left(59)
    t.hideturtle()
    t.circle(40, 180)


SCENARIOS = {
    "square": draw_square,
    "race": draw_race,
    "spiral": draw_spiral,
}


def run(scenario, output, width, height, frames_every, fps=60):
    """Drain the queue with synthetic time, saving every Nth frame."""
    output.mkdir(parents=True, exist_ok=True)
    surface = Surface(RasterCanvas(width, height), config=SurfaceConfig(width=width, height=height))
    SCENARIOS[scenario](surface)

    now = 0.0
    frame = 0
    saved = []
    while not surface.scheduler.idle:
        now += 1.0 / fps
        surface.scheduler.tick(now)
        frame += 1
        if frames_every and frame % frames_every == 0:
            saved.append(surface.save(output / f"{scenario}_{frame:05d}.png"))

    surface.redraw()
    saved.append(surface.save(output / f"{scenario}_final.png"))
    logging.getLogger(__name__).info(
        "Rendered %s: %d frames (%.1fs simulated), %d images in %s",
        scenario, frame, now, len(saved), output,
    )
    return saved


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Turtle World demo renderer")
    parser.add_argument(
        "--scenario",
        choices=sorted(SCENARIOS),
        default="square",
        help="Drawing to render (default: square)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("frames"),
        help="Directory for the PNG frames (default: ./frames)",
    )
    parser.add_argument("--width", type=int, default=640, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=480, help="Canvas height in pixels")
    parser.add_argument(
        "--frames-every",
        type=int,
        default=0,
        help="Also save every Nth animation frame (0 = final frame only)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    run(args.scenario, args.output, args.width, args.height, args.frames_every)


if __name__ == "__main__":
    main()
