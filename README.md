# rasterkit

Image processing routines that work on NumPy arrays. A grayscale image is a
2-D array with shape `(height, width)`; the morphology and suppression
functions take grayscale images only.

## Installation

```
pip install rasterkit
```

To run the test suite, install the test extra and run pytest:

```
pip install "rasterkit[test]"
pytest
```

## What is included

- `rasterkit.morphology`: `dilate` and `erode`, with `dilate_inplace` and
  `erode_inplace`. Any non-zero pixel counts as foreground. Distances are
  measured in the `Norm.L1`, `Norm.L2` or `Norm.LINF` norm; L2 distances are
  rounded up to the next integer. `k` must lie in `0..255`. The result holds
  only the values 0 and 255.
- `rasterkit.open_close`: `opening` (erosion then dilation) and `closing`
  (dilation then erosion), with `opening_inplace` and `closing_inplace`.
- `rasterkit.suppress`: `suppress_non_maximum(image, radius)` zeroes every
  pixel that is not the greatest in the `(2 * radius + 1)` square around it,
  and `local_maxima(items, radius)` does the same for a sequence of objects
  with `x`, `y` and `score` attributes. Ties go to the lexicographically
  smaller position.
- `rasterkit.pixelops`: `weighted_sum(left, right, left_weight, right_weight)`
  and `interpolate(left, right, left_weight)` blend two pixels given as
  sequences of channel values, rounding and clamping each channel to
  `0..255`.
- `rasterkit.rect`: `Rect`, built with `Rect.at(x, y).of_size(width, height)`,
  with `right()`, `bottom()`, `intersect(other)` and `contains(x, y)`. A zero
  or negative size raises `ValueError`.
- `rasterkit.point`: `Point` (with `+`, `-`, `rotate` and `invert_rotation`),
  `Rotation.from_angle`, `Line.from_points` with `distance_from_point`, and
  the functions `distance` and `distance_sq`.
- `rasterkit.union_find`: `DisjointSetForest` with `root`, `find`, `union`,
  `num_trees` and `trees`.

## Example

```python
import numpy as np
from rasterkit.morphology import Norm, dilate
from rasterkit.open_close import opening

image = np.zeros((5, 5), dtype=np.uint8)
image[2, 2] = 255

dilate(image, Norm.L1, 1)
# [[  0   0   0   0   0]
#  [  0   0 255   0   0]
#  [  0 255 255 255   0]
#  [  0   0 255   0   0]
#  [  0   0   0   0   0]]

cross = dilate(image, Norm.L1, 1)
opening(cross, Norm.LINF, 1)   # all zeros: the thin cross does not survive
```

Rectangles:

```python
from rasterkit.rect import Rect

r = Rect.at(0, 0).of_size(5, 5)
s = Rect.at(1, 4).of_size(10, 12)
r.intersect(s)   # Rect(left=1, top=4, width=4, height=1)
r.contains(4, 4) # True
```

## What is not included

The package does not read or write image files, and has no command-line
tool; images come in and go out as NumPy arrays.