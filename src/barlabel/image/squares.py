def squares(matrix):
    """Merge dark modules of a 2D code into rectangular blocks.

    Each block starts as a horizontal run of dark modules and grows
    downward while the rows below are dark over the same columns.

    :param matrix:  Rows of truthy/falsy modules, first row on top
    :return:        Yields (column, row, width, height) in modules
    """
    bits = [[bool(bit) for bit in line] for line in matrix]
    rows = len(bits)
    for y in range(rows):
        size = len(bits[y])
        x = 0
        while x < size:
            if not bits[y][x]:
                x += 1
                continue
            next_x = x + 1
            while next_x < size and bits[y][next_x]:
                next_x += 1
            height = 1
            while y + height < rows and \
                    len(bits[y + height]) >= next_x and \
                    all(bits[y + height][t] for t in range(x, next_x)):
                for t in range(x, next_x):
                    bits[y + height][t] = False
                height += 1
            yield x, y, next_x - x, height
            x = next_x
