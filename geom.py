class Point:
    def __init__(self, *args):
        if len(args) == 2:
            self.x = args[0]
            self.y = args[1]
        elif len(args) == 1:
            arg = args[0]
            if isinstance(arg, Point):
                self.x = arg.x
                self.y = arg.y
            elif isinstance(arg, tuple):
                self.x = arg[0]
                self.y = arg[1]
            else:
                raise TypeError()
        else:
            raise RuntimeError(f"Invalid point init: {args}")

    def __eq__(self, other):
        if not isinstance(other, Point):
            other = Point(other)
        return self.y == other.y and self.x == other.x

    def __add__(self, p):
        if not isinstance(p, Point):
            p = Point(p)
        return Point(self.x + p.x, self.y + p.y)

    def __sub__(self, p):
        if not isinstance(p, Point):
            p = Point(p)
        return Point(self.x - p.x, self.y - p.y)


class Rect(object):
    def __init__(self, *args):
        if len(args) == 2 and isinstance(args[0], Point) and isinstance(args[1], Point):
            self.pos = Point(args[0])
            self.size = Point(args[1])
        elif len(args) == 4:
            self.pos = Point(args[0], args[1])
            self.size = Point(args[2], args[3])
        elif len(args) == 1 and isinstance(args[0], Rect):
            self.pos = Point(args[0].pos)
            self.size = Point(args[0].size)
        else:
            raise TypeError()

    def __eq__(self, other):
        return isinstance(other, Rect) and self.pos == other.pos and self.size == other.size

    def width(self):
        return self.size.x

    def height(self):
        return self.size.y

    def right(self):
        return self.pos.x + self.size.x

    def bottom(self):
        return self.pos.y + self.size.y

    def inflate(self, d):
        self.pos -= Point(d, d)
        self.size += Point(2 * d, 2 * d)
        return self
