import os
from typing import List, Tuple
import matplotlib.pyplot as plt


class Draw:
    def __init__(self, max_bars: int = 30, color: str = "#B0C4DE") -> None:
        self.max_bars = max_bars
        self.color = color

    def usage_bar_chart(self, entries: List[Tuple[str, int]], save_path: str = None) -> str:
        """
        Draws the most used imports as a horizontal bar chart and saves it as PNG.

        Args:
            entries (List[Tuple[str, int]]): (name, count) pairs, most used first.
            save_path (str): Target file without extension. Defaults to
                ``output/import_usage``.

        Returns:
            str: Path of the written image.
        """
        file_name = os.path.basename(save_path) if save_path else "import_usage"

        directory_name = os.path.dirname(save_path) if save_path else "output"
        directory = os.path.join(os.getcwd(), directory_name)

        if not os.path.exists(directory):
            os.makedirs(directory, exist_ok=True)

        shown = entries[: self.max_bars]
        names = [name for name, _ in shown]
        counts = [count for _, count in shown]

        height = max(2, 0.35 * len(shown) + 1)
        fig, ax = plt.subplots(figsize=(10, height))
        # most used name on top
        ax.barh(names[::-1], counts[::-1], color=self.color)
        ax.set_xlabel("References")
        ax.set_title("Import usage")
        fig.tight_layout()

        image_path = os.path.join(directory, f"{file_name}.png")
        fig.savefig(image_path)
        plt.close(fig)
        return image_path
