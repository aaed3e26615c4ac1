# algosolve

This package collects solutions to well-known programming-contest problems.
You can call each solution as a library function. Most can also run as a
command. A command reads the problem's input from the file named as its first
argument, or from standard input when no file is given. It writes the answer
to standard output.

## Installation

```
pip install .
```

## Commands

| Command                  | Problem                                                      |
|--------------------------|--------------------------------------------------------------|
| `algosolve-forest`       | Count the trees in each undirected graph of a series         |
| `algosolve-greedy`       | Greedy score maximisation within a time budget               |
| `algosolve-html`         | Reflow words to 80-column lines, with `<br>` and `<hr>` tags |
| `algosolve-ipv6`         | Expand an abbreviated IPv6 address to its full form          |
| `algosolve-partial-sum`  | Shortest contiguous run whose sum reaches a target           |
| `algosolve-palindrome`   | Length of the longest substring that is not a palindrome     |
| `algosolve-explosion`    | Repeatedly remove an "explosive" substring                   |
| `algosolve-word-chain`   | Longest word chain built by inserting one letter at a time   |
| `algosolve-knapsack`     | 0/1 knapsack maximum value                                   |

Input formats:

- `algosolve-forest` reads cases of `n m` followed by `m` edges, and stops at
  `0 0`. It prints one `Case k: ...` line per case.
- `algosolve-greedy` and `algosolve-knapsack` read `n` and a limit, then `n`
  pairs. The greedy solution reads `time score` pairs and the knapsack reads
  `weight value` pairs.
- `algosolve-partial-sum` reads `n`, the target, and then `n` non-negative
  values. It prints 0 when no run reaches the target.
- `algosolve-ipv6` and `algosolve-palindrome` read one token.
- `algosolve-explosion` reads the text and then the bomb string. It prints
  `FRULA` when nothing is left.
- `algosolve-word-chain` reads `n`, the starting word, and then `n` dictionary
  words.
- `algosolve-html` reads whitespace-separated words. Its output has no
  trailing newline.

Example:

```
$ echo "25:09:1985:aa:091:4846:374:bb" | algosolve-ipv6
0025:0009:1985:00aa:0091:4846:0374:00bb
```

## Library use

```python
from algosolve.ipv6 import expand_ipv6
from algosolve.knapsack import max_value
from algosolve.explosion import explode
from algosolve.forest import count_trees, describe_case

expand_ipv6("::1")                                 # '0000:0000:0000:0000:0000:0000:0000:0001'
max_value(7, [(6, 13), (4, 8), (3, 6), (5, 12)])   # 14
explode("mirkovC4nizCC44", "C4")                   # 'mirkovniz'
describe_case(1, count_trees(3, [(1, 2), (2, 3)])) # 'Case 1: There is one tree.'
```

Other functions:

- `algosolve.group_photo.count_arrangements(n, data)` counts the orderings of
  the friends `ACFJMNRT` that satisfy conditions such as `"N~F=0"`.
- `algosolve.greedy.max_score(time_limit, items)`
- `algosolve.html_format.wrap_words(words)`, a generator of lines, and
  `render_html(words)`
- `algosolve.partial_sum.shortest_subarray(values, target)`
- `algosolve.palindrome.is_palindrome`, `all_same` and
  `longest_non_palindrome`
- `algosolve.word_chain.longest_chain(key, words)`

Invalid input raises `ValueError`. Examples are a malformed IPv6 address, a
negative value in `shortest_subarray`, and a negative weight or capacity in
`max_value`.

## Limitations

The group-photo counter has no command. It is available only as the
`count_arrangements` function.

## Running the tests

```
pip install .[test]
pytest
```