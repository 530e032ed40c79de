"""Tests for Options component complexity scoring."""

import pytest

from sfc_insight.analysis.complexity import module_name_for, score_complexity, tier_for
from sfc_insight.config import ScoringConfig
from sfc_insight.models import Tier


class TestScore:
    def test_data_only_scores_zero(self):
        record = score_complexity("a/Data.vue", "data() { return {}; }")
        assert record.score == 0
        assert record.tier is Tier.LOW
        assert record.has_data is True

    def test_mixins_alone_is_high(self):
        record = score_complexity("a/Mixed.vue", "mixins: ['a']")
        assert record.score == 30
        assert record.tier is Tier.HIGH
        assert record.has_mixins is True

    def test_immediate_and_deep_watcher(self):
        """20 immediate + 20 deep + 4 for the watch block itself."""
        record = score_complexity("a/Watch.vue", "watch: { x: { immediate: true, deep: true } }")
        assert record.score == 44
        assert record.tier is Tier.HIGH
        assert record.has_watchers is True

    def test_filters(self):
        record = score_complexity("a/F.vue", "filters: { upper }")
        assert record.score == 15
        assert record.tier is Tier.MEDIUM
        assert record.has_filters is True

    def test_full_component(self, options_high_sfc):
        record = score_complexity("src/components/orders/OrderTable.vue", options_high_sfc)
        assert record.score == 91
        assert record.tier is Tier.HIGH
        assert record.lifecycle_hook_count == 2
        assert record.computed_count == 2
        assert record.methods_count == 3
        assert record.has_mixins is True
        assert record.has_filters is True
        assert record.has_watchers is True
        assert record.has_props is True
        assert record.has_data is False

    def test_medium_component(self, options_medium_sfc):
        record = score_complexity("src/Dialog.vue", options_medium_sfc)
        assert record.score == 11
        assert record.tier is Tier.MEDIUM

    def test_record_names(self, options_low_sfc):
        record = score_complexity("src/components/forms/LoginForm.vue", options_low_sfc)
        assert record.file_name == "LoginForm.vue"
        assert record.path == "src/components/forms/LoginForm.vue"
        assert record.module_name == "forms"


class TestLifecycleHooks:
    def test_each_occurrence_counts(self):
        content = "beforeMount() {}\nbeforeMount() {}\nupdated() {}\nbeforeDestroy() {}"
        record = score_complexity("a/H.vue", content)
        assert record.lifecycle_hook_count == 4
        assert record.score == 20

    def test_hooks_are_case_sensitive(self):
        assert score_complexity("a/H.vue", "Created() {}").lifecycle_hook_count == 0

    def test_prefixed_names_do_not_double_count(self):
        """beforeCreate does not also count as created."""
        assert score_complexity("a/H.vue", "beforeCreate() {}").lifecycle_hook_count == 1


class TestApproximateCounts:
    def test_computed_blocks_are_concatenated(self):
        """Two blocks with one comma between them give two pieces, not three."""
        content = "computed: { a: x, b: y }\nother\ncomputed: { c: z }"
        record = score_complexity("a/C.vue", content)
        assert record.computed_count == 2
        assert record.score == 6

    def test_methods_block_cut_at_first_brace(self):
        """Commas in a nested call count; entries after the nested ``}`` do not."""
        content = "methods: { save() { this.a(1, 2) }, load() {} }"
        record = score_complexity("a/M.vue", content)
        assert record.methods_count == 2
        assert record.score == 4

    def test_only_first_methods_block(self):
        content = "methods: { a: x }\nmethods: { b: y, c: z }"
        assert score_complexity("a/M.vue", content).methods_count == 1

    def test_absent_blocks_count_zero(self):
        record = score_complexity("a/E.vue", "export default {}")
        assert record.computed_count == 0
        assert record.methods_count == 0
        assert record.score == 0

    def test_each_watch_block_counts(self):
        content = "watch: { a() {} }\nwatch: { b() {} }"
        assert score_complexity("a/W.vue", content).score == 8


class TestFlags:
    @pytest.mark.parametrize("content", ["props: { a: String }", "props: ['a']"])
    def test_props(self, content):
        assert score_complexity("a/P.vue", content).has_props is True

    @pytest.mark.parametrize("content", ["data() {", "data: () => ({})", "data: { a: 1 }"])
    def test_data(self, content):
        assert score_complexity("a/D.vue", content).has_data is True

    def test_flags_do_not_score(self):
        record = score_complexity("a/P.vue", "props: ['a'],\ndata: { a: 1 }")
        assert record.score == 0


class TestModuleName:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("a/components/foo/Bar.vue", "foo"),
            ("a/views/Bar.vue", "views"),
            ("a/misc/Bar.vue", "other"),
            ("src/components/Button.vue", "Button.vue"),
            ("src/components", "other"),
            ("a/components/x/views/B.vue", "x"),
            ("views/components/forms/F.vue", "forms"),
            ("/abs/views/Home.vue", "views"),
            ("a/myviews/Home.vue", "other"),
            ("a/components/one/components/two/C.vue", "one"),
        ],
    )
    def test_derivation(self, path, expected):
        assert module_name_for(path) == expected


class TestTier:
    @pytest.mark.parametrize(
        "score, expected",
        [(0, Tier.LOW), (9, Tier.LOW), (10, Tier.MEDIUM), (29, Tier.MEDIUM), (30, Tier.HIGH), (500, Tier.HIGH)],
    )
    def test_default_boundaries(self, score, expected):
        assert tier_for(score) is expected

    def test_custom_boundaries(self):
        scoring = ScoringConfig(high_threshold=50, medium_threshold=20)
        assert tier_for(44, scoring) is Tier.MEDIUM
        assert tier_for(19, scoring) is Tier.LOW

    def test_custom_weights(self):
        record = score_complexity("a/M.vue", "mixins: ['a']", ScoringConfig(mixins_weight=5))
        assert record.score == 5
        assert record.tier is Tier.LOW
