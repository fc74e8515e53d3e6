# antfarm

`antfarm` reads a description of an ant farm: a number of ants, a set of
rooms and the tunnels between them. It then moves every ant from the start
room to the end room in as few turns as it can. It finds a set of
non-overlapping paths with repeated breadth-first searches over a residual
graph. It shares the ants out between those paths and prints the moves for
each turn.

## Installing

```
pip install .
```

## Running

The `antfarm` command reads the farm from standard input. It takes no
arguments apart from `--help`.

```
antfarm < farm.txt
```

The command first echoes every input line. After that it prints an empty
line and then one line for each turn. A move is written as `L<ant>-<room>`,
and the moves of one turn share a line, separated by spaces. When the farm
has zero ants, no turn lines follow the empty line.

If the input is invalid, or no path joins the start room to the end room, the
command still echoes the input. It then writes `Error` to standard error,
between two newlines, and exits with status 1.

## Input format

```
3
##start
start 1 0
mid 2 0
##end
end 3 0
start-mid
mid-end
```

- The first line must be the number of ants. It is written in digits only,
  and its value can be at most 2147483647. Comments may not come before it.
- Rooms are written `name x y`.
  - A name may not begin with `L`.
  - The coordinates must be non-negative whole numbers separated by a single
    space.
  - Two rooms may not share a name.
- `##start` and `##end` mark the room that follows them. Both are required.
- Lines that begin with a single `#` are comments and are ignored. Other `##`
  lines are accepted but have no effect.
- Tunnels are written `name1-name2` and must name known rooms. Room names may
  contain `-`: every `-` in the line is tried as the separator, from the
  left, until both sides name rooms.
- Tunnels come after all the rooms. At least one tunnel is required.
- Empty lines are not allowed.

## Using it from Python

```python
import io
from antfarm.cli import run

farm_text = "1\n##start\na 0 0\n##end\nb 1 1\na-b\n"
out, err = io.StringIO(), io.StringIO()
ok = run(farm_text, out, err)
print(out.getvalue())
```

`run` returns `True` on success and `False` after it has written the error
message to `err`.

You can also use the pieces on their own:

- `antfarm.parser.parse_farm` builds a connected `Farm` from lines of text.
  `antfarm.parser.Parser` does the same one line at a time.
- `antfarm.solver.solve` picks the best path set. It returns a `Solution`
  with `paths`, `ants` and `turns`.
- `antfarm.output.simulate` yields the line of moves for each turn.

These functions raise `antfarm.model.FarmError` when the description or the
farm is invalid.

## Running the tests

```
pip install .[test]
pytest
```