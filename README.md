# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of operations, and prints the operations it used, one per line.

## Installation

    pip install .

## Usage

Pass the numbers as separate arguments, as one space-separated string,
or as a mix of both:

    push_swap 3 2 1
    push_swap "5 4 3 2 1"

The same command is available as `python -m pushswap.cli`.

The output is the list of operations that leaves stack `a` sorted in
ascending order from top to bottom:

| Operation   | Meaning                                         |
|-------------|-------------------------------------------------|
| `sa`        | swap the top two elements of `a`                |
| `pa` / `pb` | push the top of one stack onto `a` / onto `b`   |
| `ra` / `rb` | rotate: the top element goes to the bottom      |
| `rra` / `rrb` | reverse rotate: the bottom element goes to the top |

Exit status and output:

- no arguments: nothing is printed, exit status 1;
- input already in ascending order (including a single number):
  nothing is printed, exit status 0;
- invalid input prints `Error` on standard output and exits with
  status 1. Invalid input is an empty or blank argument, a token that is
  not an optional `+`/`-` followed by decimal digits, two tokens with the
  same value, a token longer than 11 characters, or a value outside the
  32-bit signed range.

## Strategy

- two numbers: at most one swap;
- three numbers: a fixed swap/rotate decision, at most two moves;
- four to seven numbers: move the smallest elements to `b`, sort the
  remaining three, then push them back;
- more than seven: a chunked sort that pushes elements to `b` within a
  window of ranks proportional to the square root of the count, then
  pulls them back from the largest rank down.

## Library use

    from pushswap.algorithms import solve

    moves = solve([3, 2, 1])   # ['ra', 'sa']

- `pushswap.algorithms.solve(numbers)` returns the list of move names.
  It raises `pushswap.parsing.InputError` when the numbers are already
  sorted. The individual strategies (`simple_sort`, `insertion_sort`,
  `k_sort_push`, `k_sort_pull`, `sort_stacks`) and the helpers
  `rank`, `approx_sqrt` and `is_rot_sort` live in the same module.
- `pushswap.parsing.parse_numbers(args)` validates command-line
  arguments and returns the integers they hold, an empty list when there
  are no arguments, or `None` when they are already in order. It raises
  `InputError` (a `ValueError`) on bad input.
- `pushswap.stack.Stack(name, values, log)` models one stack of
  `Node` objects (`data` and rank `index`) with `swap`, `rotate`,
  `reverse` and `push`; each move that changes the stack is passed by
  name to the `log` callable.
- `pushswap.cli.main(argv)` runs the command and returns its exit status.

The `pushswap.libft` sub-package holds small helpers that the sorter
does not use:

- `chars`: ASCII classification and case conversion of character codes
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`);
- `memory`: byte-buffer operations (`memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`);
- `strings`: text operations (`strlen`, `strchr`, `strrchr`,
  `strnstr`, `strdup`, `striteri`, `strmapi`, `strjoin`, `strlcpy`,
  `strlcat`, `strncmp`, `strtrim`, `substr`);
- `linked`: a singly linked list, `LinkedList` of `ListNode`;
- `output`: `put_char`, `put_str`, `put_endl` and `put_nbr` writing to
  a text stream, standard output by default.

## What it does not do

There is no checker: the package prints a solution but has no command
that reads a list of operations and verifies that it sorts the input.
Numbers are taken only from the command line, not from standard input
or a file.

## Tests

    pip install ".[test]"
    pytest