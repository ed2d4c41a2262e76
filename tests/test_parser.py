import pytest

from mgparse.config import GrammarError, MergeStrategy, ParserConfig
from mgparse.derivation import DerivationTree
from mgparse.feature import Feature
from mgparse.lexical_item import LexicalItem
from mgparse.parser import MinimalistParser
from mgparse.phase import PhaseConfig


def setup_test_parser() -> MinimalistParser:
    parser = MinimalistParser()
    parser.add_to_lexicon("the", LexicalItem("the", [Feature.categorial("D"), Feature.selector("N")]))
    parser.add_to_lexicon("cat", LexicalItem("cat", [Feature.categorial("N")]))
    parser.add_to_lexicon("dog", LexicalItem("dog", [Feature.categorial("N")]))
    parser.add_to_lexicon("sleeps", LexicalItem("sleeps", [Feature.categorial("V"), Feature.selector("D")]))
    parser.add_to_lexicon(
        "chases",
        LexicalItem("chases", [Feature.categorial("V"), Feature.selector("D"), Feature.selector("D")]),
    )
    return parser


def test_basic_linearization_orders_by_index():
    parser = setup_test_parser()
    d = LexicalItem("the", [Feature.categorial("D")])
    n = LexicalItem("cat", [Feature.categorial("N")])
    dp = DerivationTree.merge(DerivationTree.leaf(n, 1), DerivationTree.leaf(d, 0), [Feature.categorial("D")], 2)
    # The projected node carries the specifier's form at index 2.
    assert parser.linearize(dp) == ["the", "cat", "cat"]


def test_merge_operation():
    parser = setup_test_parser()
    d_node = DerivationTree.leaf(LexicalItem("the", [Feature.selector("N"), Feature.categorial("D")]), 0)
    n_node = DerivationTree.leaf(LexicalItem("cat", [Feature.categorial("N")]), 1)
    merged = parser.apply_merge(n_node, d_node)
    assert merged is not None
    assert merged.chain.head.features == [Feature.categorial("D")]
    left, right = merged.children
    assert left.chain.head.phonetic_form == "cat"
    assert right.chain.head.phonetic_form == "the"
    assert left.chain.head.features == []
    assert merged.index == 0
    assert parser.linearize(merged) == ["cat", "the", "cat"]
    # inputs are not modified
    assert d_node.chain.head.features == [Feature.selector("N"), Feature.categorial("D")]


def test_merge_fails_without_matching_features():
    parser = setup_test_parser()
    a = DerivationTree.leaf(LexicalItem("a", [Feature.categorial("D")]), 0)
    b = DerivationTree.leaf(LexicalItem("b", [Feature.categorial("N")]), 1)
    assert parser.apply_merge(a, b) is None


def test_strong_selector_triggers_head_movement():
    parser = MinimalistParser()
    head = DerivationTree.leaf(LexicalItem("will", [Feature.strong_selector("V"), Feature.categorial("T")]), 0)
    spec = DerivationTree.leaf(LexicalItem("go", [Feature.categorial("V")]), 1)
    result = parser.apply_merge(spec, head)
    assert result.chain.head.phonetic_form == "willgo"
    assert result.chain.head.features == [Feature.categorial("T")]
    assert result.children[1].chain.head.features == [Feature.categorial("T")]


def test_move_operation():
    parser = setup_test_parser()
    c = LexicalItem("", [Feature.licensor("wh"), Feature.categorial("C")])
    what = LexicalItem("what", [Feature.licensee("wh"), Feature.categorial("D")])
    v = LexicalItem("see", [Feature.categorial("V"), Feature.selector("D")])
    vp = DerivationTree.merge(DerivationTree.leaf(what, 0), DerivationTree.leaf(v, 1), [Feature.categorial("V")], 2)
    cp = DerivationTree.merge(
        vp, DerivationTree.leaf(c, 3), [Feature.licensor("wh"), Feature.categorial("C")], 4
    )
    moved = parser.apply_move(cp)
    assert moved is not None
    assert moved.chain.head.phonetic_form == "what"
    assert moved.chain.tail == [0]
    assert moved.chain.head.features == [Feature.categorial("C")]
    base, trace = moved.children
    assert base.chain.head.features == [Feature.categorial("C")]
    assert base.children[0].children[0].chain.head.is_empty()
    assert trace.chain.head.is_empty()
    assert parser.linearize(moved) == ["see", "what", "what"]
    # original tree untouched
    assert cp.chain.head.features[0] == Feature.licensor("wh")
    assert cp.children[0].children[0].chain.head.phonetic_form == "what"


def test_move_requires_licensor():
    parser = MinimalistParser()
    tree = DerivationTree.leaf(LexicalItem("x", [Feature.categorial("D")]), 0)
    assert parser.apply_move(tree) is None


def test_find_movable_element_missing_licensee():
    parser = MinimalistParser()
    tree = DerivationTree.merge(
        DerivationTree.leaf(LexicalItem("a", [Feature.licensee("case")]), 0),
        DerivationTree.leaf(LexicalItem("b", [Feature.categorial("V")]), 1),
        [Feature.licensor("wh")],
        2,
    )
    assert parser.find_movable_element(tree, "wh") is None
    found = parser.find_movable_element(tree, "case")
    chain, new_tree = found
    assert chain.head.phonetic_form == "a"
    assert chain.tail == [0]
    assert new_tree.children[0].chain.head.is_empty()


def test_phase_constraints_block_merge_into_completed_phase():
    config = ParserConfig(phase_config=PhaseConfig(enforce_pic=True))
    parser = MinimalistParser(config)
    c = LexicalItem("that", [Feature.selector("D"), Feature.selector("D"), Feature.phase("C")])
    c_node = DerivationTree.leaf(c, 0)
    dp_node = DerivationTree.leaf(LexicalItem("it", [Feature.categorial("D")]), 1)
    merged = parser.apply_merge(dp_node, c_node)
    assert merged is not None
    assert merged.is_phase
    merged.complete_phase()
    dp2 = DerivationTree.leaf(LexicalItem("they", [Feature.categorial("D")]), 2)
    assert parser.apply_merge(dp2, merged) is None

    open_parser = MinimalistParser(ParserConfig(phase_config=PhaseConfig(enforce_pic=False)))
    assert open_parser.apply_merge(dp2, merged).chain.head.features == [Feature.phase("C")]


def test_pair_merge_strategy():
    parser = MinimalistParser(ParserConfig(merge_strategies=[MergeStrategy.PAIR_MERGE]))
    head = DerivationTree.leaf(LexicalItem("book", [Feature.adjunct_selector("A"), Feature.categorial("N")]), 0)
    spec = DerivationTree.leaf(LexicalItem("red", [Feature.categorial("A")]), 1)
    result = parser.apply_merge(spec, head)
    assert result.chain.head.phonetic_form == "book"
    assert result.chain.head.features == [Feature.categorial("N")]
    left, right = result.children
    assert left.is_adjunct
    assert left.chain.head.phonetic_form == "red"
    assert not right.is_adjunct


def test_late_merge_strategy():
    parser = MinimalistParser(ParserConfig(merge_strategies=[MergeStrategy.LATE_MERGE]))
    head = DerivationTree.leaf(
        LexicalItem("the", [Feature.categorial("D"), Feature.delayed(Feature.selector("N"))]), 0
    )
    spec = DerivationTree.leaf(LexicalItem("book", [Feature.categorial("N")]), 1)
    result = parser.apply_merge(spec, head)
    assert result.delayed_features == []
    left, right = result.children
    assert left.chain.head.phonetic_form == "book"
    assert right.chain.head.phonetic_form == "the"


def test_parser_config():
    default_parser = MinimalistParser()
    assert default_parser.config.max_derivation_depth == 20
    assert default_parser.config.allow_remnant_movement is False

    custom = ParserConfig(max_derivation_depth=30, allow_remnant_movement=True,
                          merge_strategies=[MergeStrategy.STANDARD, MergeStrategy.PAIR_MERGE])
    parser = MinimalistParser(custom)
    assert parser.config.max_derivation_depth == 30
    assert len(parser.config.merge_strategies) == 2


def test_set_config_updates_phase_checker():
    parser = MinimalistParser()
    config = ParserConfig(phase_config=PhaseConfig(phase_heads=["T"]))
    parser.set_config(config)
    assert parser.config is config
    assert parser.phase_checker.config.phase_heads == ["T"]


def test_validate_feature():
    parser = MinimalistParser()
    assert parser.validate_feature(Feature.selector("D"))
    assert not parser.validate_feature(Feature.selector("X"))
    assert parser.validate_feature(Feature.licensor("wh"))
    assert not parser.validate_feature(Feature.licensee("nonexistent"))
    assert parser.validate_feature(Feature.agreement("num", "sg"))
    assert not parser.validate_feature(Feature.delayed(Feature.selector("X")))
    parser.register_categorial_feature("X")
    assert parser.validate_feature(Feature.delayed(Feature.selector("X")))
    parser.register_movement_feature("scr")
    assert parser.validate_feature(Feature.licensee("scr"))


def test_allocate_index_increments():
    parser = MinimalistParser()
    assert [parser.allocate_index() for _ in range(3)] == [0, 1, 2]
    assert parser.next_index == 3


def test_create_category_with_features():
    parser = MinimalistParser()
    item = parser.create_category_with_features("C", [("selector", "T"), ("licensor", "wh")])
    assert item.phonetic_form == ""
    assert item.features == [Feature.categorial("C"), Feature.selector("T"), Feature.licensor("wh")]
    with pytest.raises(GrammarError):
        parser.create_category_with_features("C", [("bogus", "T")])


def test_parse_single_complete_word():
    parser = MinimalistParser()
    parser.add_to_lexicon("hello", LexicalItem("hello", [Feature.categorial("C")]))
    result = parser.parse("hello")
    assert result is not None
    assert result.chain.head.phonetic_form == "hello"
    assert parser.next_index == 0


def test_parse_unknown_word_returns_none():
    parser = setup_test_parser()
    assert parser.parse("the unicorn") is None


def test_parse_respects_depth_limit():
    parser = MinimalistParser(ParserConfig(max_derivation_depth=0))
    parser.add_to_lexicon("hello", LexicalItem("hello", [Feature.categorial("C")]))
    assert parser.parse("hello") is None