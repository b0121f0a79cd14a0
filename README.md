# kpltools

Building blocks for a front end of KPL, a small Pascal-like teaching language,
along with the plain data structures they rest on.

## What is in the package

- **Character classes.** `kpltools.charcode.char_code(ch)` returns the
  `CharCode` of a single character: `LETTER` for ASCII letters, `DIGIT`,
  `SPACE` for blank characters, one member per KPL symbol (`PLUS`, `LPAR`,
  `SINGLEQUOTE`, ...), and `UNKNOWN` for anything else. `UNKNOWN` also covers
  `None`, which stands for end of input.
- **A source reader.** `kpltools.reader.CharReader` steps through text one
  character at a time with `read_char()`. It keeps `current_char` (`None` at
  the end), `line_no` (starting at 1) and `col_no` (reset to 0 on each
  newline). `open_reader(path)` reads a file and returns a reader over it. It
  raises `OSError` if the file cannot be opened.
- **A symbol table.** `kpltools.symtab.SymbolTable` creates program,
  constant, type, variable, function, procedure and parameter objects
  (`Symbol`). It tracks the current block with `enter_block`/`exit_block`,
  adds objects with `declare`, and finds names through enclosing blocks with
  `lookup`. A new table already holds the built-in routines `READC`, `READI`,
  `WRITEI`, `WRITEC` and `WRITELN` in its `globals` list. Types and constants
  are built with `make_int_type`, `make_char_type`, `make_array_type`,
  `duplicate_type`, `compare_type`, `make_int_constant` and
  `make_char_constant`.
- **Symbol-table dumps.** `kpltools.debug` has `format_type`,
  `format_constant`, `format_object` and `format_scope`. They return a scope
  tree as indented text.
- **Data structures.**
  - `kpltools.linkedlist.CursorList` is a list with a movable cursor. It
    inserts at the head, at the tail, before or after the cursor, or at a
    position, and it deletes and reverses in place.
  - `kpltools.bstree.BSTree` is an unbalanced binary search tree. Besides
    search, insert and delete, it gives the tree's height and its leaf, inner
    and right-child counts.
  - `kpltools.boundedlist.BoundedList` is a fixed-capacity list with
    one-based positions. When an operation cannot be carried out it raises
    `BoundedListError`.
  - `kpltools.wordindex.WordIndex` indexes the words of a text. For each word
    it records how often the word occurs and on which lines, leaving out stop
    words and proper nouns.

## What it does not do

The package does not turn KPL source into tokens: it has no lexical scanner,
no token types and no parser, and so no command that reads a KPL program. The
character classes, the reader and the symbol table are the pieces such a
front end would be built from.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### kpl-wordindex

Builds a word index of a text file:

```
kpl-wordindex [TEXT] [--stop-words FILE] [--output FILE]
```

The arguments default to `alice30.txt`, `stopw.txt` and `ketqua.txt`. Each
line of the index holds a word, its count and the lines it occurs on, for
example `cat 2, 1, 2`. The index is written to the output file and also
printed. A file that cannot be opened is reported with `cant open <name>` and
treated as empty.

### kpl-symtab-demo

Builds the symbol table of a small sample program, `PRG`, with a function `f`
and a procedure `p`, and prints it:

```
kpl-symtab-demo
```

## Using the library

Indexing words:

```python
from kpltools.wordindex import WordIndex, load_stop_words

index = WordIndex(load_stop_words("the\na\n"))
index.add_text("the cat sat\non a cat\n")
print(index.format(), end="")
# cat 2, 1, 2
# on 1, 2
# sat 1, 1
```

Working with the symbol table:

```python
from kpltools.debug import format_object
from kpltools.symtab import SymbolTable, make_int_constant, make_int_type

table = SymbolTable()
program = table.create_program("PRG")
table.enter_block(program.scope)

const = table.create_constant("c1")
const.value = make_int_constant(10)
table.declare(const)

var = table.create_variable("v1")
var.type = make_int_type()
table.declare(var)

assert table.lookup("c1") is const
table.exit_block()
print(format_object(program, 0), end="")
# Program PRG
#     Const c1 = 10
#     Var v1 : Int
```

Reading and classifying characters:

```python
from kpltools.charcode import CharCode, char_code
from kpltools.reader import CharReader

reader = CharReader("x:=1")
assert char_code(reader.current_char) is CharCode.LETTER
reader.read_char()
assert char_code(reader.current_char) is CharCode.COLON
```