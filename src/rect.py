from dataclasses import dataclass


@dataclass
class Rect:
    '''
    Axis-aligned integer rectangle.

    Edges are stored as given: `right` and `bottom` are exclusive, width and height may
    come out negative for a rectangle built with swapped edges. Nothing normalizes them.
    '''
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @classmethod
    def from_xywh(cls, x: int, y: int, width: int, height: int) -> 'Rect':
        '''
        Create a rectangle from its top-left corner and size.

        Example:
            >>> Rect.from_xywh(10, 10, 30, 20)
            Rect(left=10, top=10, right=40, bottom=30)
        '''
        return cls(x, y, x + width, y + height)


    def width(self) -> int:
        return self.right - self.left


    def height(self) -> int:
        return self.bottom - self.top


    def copy(self) -> 'Rect':
        return Rect(self.left, self.top, self.right, self.bottom)


    def inflate(self, dx: int, dy: int) -> None:
        '''Grow the rectangle by `dx` on the left and right and by `dy` on the top and bottom.'''
        self.left -= dx
        self.right += dx
        self.top -= dy
        self.bottom += dy


    def deflate(self, dx: int, dy: int) -> None:
        '''Shrink the rectangle by `dx` on the left and right and by `dy` on the top and bottom.'''
        self.left += dx
        self.right -= dx
        self.top += dy
        self.bottom -= dy


    def offset(self, dx: int, dy: int) -> None:
        self.left += dx
        self.right += dx
        self.top += dy
        self.bottom += dy


    def contain(self, x: int, y: int) -> bool:
        '''Test a point against the rectangle, all four edges inclusive.'''
        return self.left <= x <= self.right and self.top <= y <= self.bottom


    def center(self) -> tuple[int, int]:
        # floor division, odd sizes lean to the top-left
        return (self.left + self.width() // 2, self.top + self.height() // 2)


    def set_center(self, center_x: int, center_y: int) -> None:
        half_width = self.width() // 2
        half_height = self.height() // 2
        self.left = center_x - half_width
        self.right = center_x + half_width
        self.top = center_y - half_height
        self.bottom = center_y + half_height


    def set_position(self, left: int, top: int) -> None:
        '''Move the top-left corner to (`left`, `top`) keeping the size.'''
        width = self.width()
        height = self.height()
        self.left = left
        self.right = left + width
        self.top = top
        self.bottom = top + height


    def set_size(self, width: int, height: int) -> None:
        '''Resize the rectangle around its current center.'''
        center_x = (self.left + self.right) // 2
        center_y = (self.top + self.bottom) // 2
        self.left = center_x - width // 2
        self.right = center_x + width // 2
        self.top = center_y - height // 2
        self.bottom = center_y + height // 2


    def intersect(self, other: 'Rect') -> 'Rect | None':
        '''
        Compute the overlap of two rectangles.

        Rectangles that only touch along an edge or at a corner intersect in a rectangle of
        zero width and/or height. None is returned only when the overlap is negative on
        either axis.

        Args:
            other (Rect): The rectangle to intersect with.

        Returns:
            Rect | None: The overlapping rectangle, or None when the rectangles are apart.
        '''
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right < left or bottom < top:
            return None
        return Rect(left, top, right, bottom)
