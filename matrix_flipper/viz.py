from termcolor import colored


# Palette for the small values of label grids; anything above 9 is white.
color_map = {
    0: "dark_grey",
    1: "green",
    2: "yellow",
    3: "blue",
    4: "magenta",
    5: "cyan",
    6: "light_grey",
    7: "light_red",
    8: "red",
    9: "light_blue",
}


def color_string(array, color=True):
    cells = [f"{elem:3}" for elem in array]
    if color:
        cells = [
            colored(cell, color_map.get(elem, "white"))
            for cell, elem in zip(cells, array)
        ]
    return " ".join(cells)


def format_matrix(matrix, color=True):
    rows, cols = matrix.shape
    if rows == 0 or cols == 0:
        return f"<empty {rows}x{cols}>"
    return "\n".join(color_string(row, color) for row in matrix.tolist())


def print_matrix(matrix, title=None, color=True):
    if title:
        print(f"{title} ({matrix.shape[0]}x{matrix.shape[1]}):")
    print(format_matrix(matrix, color))
