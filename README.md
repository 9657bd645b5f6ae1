# charseg

Segmentation of text into words and separators, meant as the first step of
building a search index. The package has no runtime dependencies.

## How text is split

1. The text is cut on separators. By default these are the characters of the
   Unicode punctuation and space categories, plus the sequences `". "`,
   `", "` and `"។ល។"`. They are listed in `charseg.separators.DEFAULT_SEPARATORS`.
   Matching is leftmost-longest, and each separator becomes a segment of its own.
2. Each stretch of text between two separators goes to a `Segmenter`. The
   default is `LatinSegmenter`, which splits on camelCase boundaries.

```python
from charseg.segmentation import segment_str, segment

list(segment_str("camelCase kebab-case"))
# ['camel', 'Case', ' ', 'kebab', '-', 'case']

for token in segment("Hello world!"):
    print(token.lemma, token.char_start, token.char_end, token.byte_start, token.byte_end)
```

`segment` yields `charseg.token.Token` objects. Each token records where its
lemma sits in the text you passed in, both in characters and in UTF-8 bytes.
Tokens from `segment` have the kind `TokenKind.UNKNOWN`. `Token` also provides
`byte_len()`, `char_count()`, `is_word()`, `is_stopword()`, `is_separator()`,
`separator_kind()` and `original_lengths(num_bytes)`.

`charseg.separators.CONTEXT_SEPARATORS` lists the separators that end a phrase.

## Segmenters

`charseg.segmenters` provides these segmenters:

- `LatinSegmenter` splits on camelCase boundaries. It uses
  `charseg.camel_case.split_camel_case_bounds`.
- `ArabicSegmenter` splits a word that starts with the article (`ال`, `أل`,
  `إل`, `آل`, `ٱل`) into the article and the rest of the word.
- `DummySegmenter` splits after every space.
- `FstSegmenter(words)` takes the longest dictionary word at each position. It
  falls back to a single character where no word matches. `words` is either a
  collection of words or a mapping from word to an integer output.
  `find_longest_prefix(words, value)` returns `(output, length)` for the
  longest dictionary word that begins `value`, or `None` if there is none.

Pass a segmenter as the third argument of `segment_str` or `segment`, or give
it to `TokenizerBuilder.segmenter(...)`.

## Custom configuration

`TokenizerBuilder` from `charseg.tokenizer` accepts your own separators, a
dictionary of words, or both. Dictionary words are cut out before any segmenter
runs, so they are never split.

```python
from charseg.tokenizer import TokenizerBuilder

tokenizer = TokenizerBuilder().words_dict(["J. R. R.", "Dr.", "J. K."]).build()
list(tokenizer.segment_str("J. R. R. Tolkien. J. K. Rowling. Dr. Seuss"))
# ['J. R. R.', ' ', 'Tolkien', '. ', 'J. K.', ' ', 'Rowling', '. ', 'Dr.', ' ', 'Seuss']

tokenizer = TokenizerBuilder().separators([" ", ", ", ". ", "?", "!"]).build()
list(tokenizer.segment_str("right? Brr, it's"))
# ['right', '?', ' ', 'Brr', ', ', "it's"]
```

The pattern matching behind this is available directly. See `PatternMatcher`
and `split_on_matches` in `charseg.matcher`.

## CJK ideograph variants

`charseg.kvariants` reads kVariants tables. Each line holds a source
ideograph, a relation and a destination ideograph, separated by tabs. Relations
map to `KVariantClass`. Malformed lines, unknown relations and a source given
twice raise `ValueError`.

```python
from charseg.kvariants import parse_kvariants

table = parse_kvariants(["亚 (U+4E9A)\tsimp\t亞 (U+4E9E)"])
table["亚"].destination_ideograph  # '亞'
```

`load_kvariants(path)` reads a table from a UTF-8 file. No table ships with the
package.

## What the package does not do

- It does not detect the script or language of a text. One segmenter handles
  the whole text.
- It does not normalize lemmas (lowercasing, removing diacritics) and does not
  classify tokens as words, stop words or separators.
- It has no built-in segmenters for Chinese, Japanese, Korean, Thai or Khmer,
  and no word dictionaries for them. `FstSegmenter` can use a dictionary you
  supply.