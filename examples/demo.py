"""Small demonstration of perfect maze generation."""

from __future__ import annotations

import numpy as np

from perfectmaze import SpanningTreeGenerator, carve_grid, generate_many, is_perfect


def main() -> None:
    height, width = 11, 21
    generator = SpanningTreeGenerator(height, width, verbose=True)
    rng = np.random.default_rng(0)
    passages = generator.generate(rng)
    grid = carve_grid(height, width, passages)

    print(f"Opened {len(passages)} walls, perfect: {is_perfect(grid)}")
    print(grid)

    batch = generate_many(height, width, 4, seed=0, n_jobs=2)
    print(f"Batch of {len(batch)} mazes, {len(batch[0])} connectors each")


if __name__ == "__main__":
    main()
