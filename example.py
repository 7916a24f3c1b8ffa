#!/usr/bin/env python3
"""
Example usage of the sparselife package.
"""

from sparselife import GameOfLife, PatternLibrary, render


def main():
    """Demonstrate programmatic usage of the sparselife package."""
    library = PatternLibrary()
    glider = library.get_pattern("glider")

    game = GameOfLife(glider.to_live_set())

    print("Initial state:")
    print(render(game.cells))
    print(f"Population: {game.population}")
    print()

    # Run simulation for 8 generations
    for _ in range(8):
        game.step()
        print(f"Generation {game.generation}:")
        print(render(game.cells))
        print(f"Population: {game.population}")

        if game.cycle_detected:
            print(f"Cycle detected! Length: {game.cycle_length}")
            break

        print()

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
