# mgparse

A small library for working with Minimalist Grammars: feature bundles,
lexical items, derivation trees built by Merge, Pair Merge, Late Merge
and Move, phases and the Phase Impenetrability Condition, parallel
workspaces, sideward movement, and a breadth-first parser over a lexicon.
It has no dependencies outside the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Features and lexical items

`mgparse.feature.Feature` is a frozen dataclass with a `FeatureKind` and
constructors for every kind:

```python
from mgparse.feature import Feature
from mgparse.lexical_item import LexicalItem

the = LexicalItem("the", [Feature.categorial("D"), Feature.licensee("case")])
str(the)                       # 'the[D -case]'

Feature.selector("D").matches(Feature.categorial("D"))       # True
Feature.licensor("wh").matches_move(Feature.licensee("wh"))  # True
```

Features print as `D`, `=D`, `+wh`, `-wh`, `=v+` (strong selector), `~A`
(adjunct selector), `φ:key=value` (agreement), `⚑C` (phase) and
`=D[delay]` (delayed, for late merge).

`LexicalItem` holds a phonetic form, a feature list and optional
`AgreementFeatures` (a flat attribute set with `add`, `get` and `unify`;
`unify` returns `None` on a conflict). `LexicalItem.empty()` is the silent,
featureless item used for traces.

`mgparse.config.parse_feature` reads the `type:name` form, for example
`"sel:N"`, `"sel+:v"`, `"sel*:A"`, `"licensee:wh"` or `"phase:C"`, and
raises `GrammarError` (a `ValueError`) for anything else.

## Derivations

```python
from mgparse.derivation import DerivationTree

det = DerivationTree.leaf(LexicalItem("the", [Feature.categorial("D")]), 0)
noun = DerivationTree.leaf(LexicalItem("cat", [Feature.categorial("N")]), 1)
dp = DerivationTree.merge(det, noun, [Feature.categorial("DP")], 2)
dp.depth()       # 1
dp.rule()        # 'Merge'
dp.get_yield()   # ['the', 'the', 'cat']  (the projecting node carries its head's form)
```

`DerivationTree.pair_merge`, `DerivationTree.late_merge` and
`DerivationTree.move` build adjunction, late-merge and movement nodes.
`str(tree)` gives an indented outline marking adjuncts and phases.

## Phases

`mgparse.phase.PhaseChecker`, configured by `PhaseConfig` (phase heads
`C`, `v` and `D`, one edge element and PIC enforcement by default), finds
phase heads, phase edges and the phase spine, checks extraction under the
PIC with `check_extraction`, and completes phases with `transfer_phase`.

## Parsing

```python
from mgparse.parser import MinimalistParser

parser = MinimalistParser()
parser.add_to_lexicon("the", LexicalItem("the", [Feature.selector("N"), Feature.categorial("D")]))
parser.add_to_lexicon("cat", LexicalItem("cat", [Feature.categorial("N")]))
tree = parser.parse("the cat")
```

`parse` adds two silent heads (a `T` and a `C`) to the words' lexical
entries and searches breadth-first for a tree whose only remaining feature
is `C` and whose linearization, ordered by node index, equals the input.
It returns that `DerivationTree` or `None`; the search takes at most
`ParserConfig.max_derivation_depth` steps (20 by default). Unknown words
make it return `None`. Both failures are reported through the `logging`
module. The parser object is left unchanged by `parse`.

`apply_merge`, `apply_move`, `find_movable_element` and `linearize` can be
used on their own. `ParserConfig.merge_strategies` chooses among
`MergeStrategy.STANDARD`, `PAIR_MERGE` and `LATE_MERGE`.
`create_category_with_features` builds a silent item from a category and
`(type, name)` pairs, raising `GrammarError` for an unknown type.

## Workspaces and sideward movement

`mgparse.workspace.WorkspaceRegistry` keeps numbered workspaces that can
be activated, deactivated, copied, transferred and merged (a merged
workspace carries the first workspace's tree).
`mgparse.sideward.sideward_move` moves a chain between two workspaces of a
parser in the `SidewardMovementType` styles `NUNES_STYLE`,
`PARALLEL_DERIVATION`, `MULTIDOMINANCE` and `WHOLESALE_LATE`.

## What it does not do

There is no command-line program and no grammar or lexicon file format:
lexicons are built in Python with `add_to_lexicon`. The parser only uses
the merge strategies; `movement_strategies`, `allow_remnant_movement`,
`allow_vacuous_movement`, `enable_parallel_workspaces` and
`max_workspaces` are stored in `ParserConfig` but do not change how
`parse` searches.