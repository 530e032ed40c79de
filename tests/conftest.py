"""Shared test fixtures for SFC Insight."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


OPTIONS_LOW = """<template>
  <div>{{ msg }}</div>
</template>

<script>
export default {
  data() {
    return { msg: 'hi' }
  }
}
</script>
"""

OPTIONS_MEDIUM = """<script>
export default {
  props: { value: String },
  methods: { open: openDialog, close: closeDialog, toggle: toggleDialog },
  mounted() {
    this.open()
  }
}
</script>
"""

# mixins 30 + deep watcher 20 + filters 15 + 2 hooks 10
# + computed 2 pieces 6 + methods 3 pieces 6 + one watch block 4 = 91
OPTIONS_HIGH = """<template>
  <table></table>
</template>

<script>
export default {
  name: 'OrderTable',
  mixins: [formatting],
  filters: { currency: formatCurrency },
  props: ['orders'],
  computed: { ...mapGetters(['user', 'cart']) },
  methods: { save: saveOrder, reset: resetOrder, load: loadOrder },
  watch: { orders: { handler: reload, deep: true } },
  created() {
    this.load()
  },
  mounted() {
    this.reset()
  }
}
</script>
"""

COMPOSITION_SETUP = """<template>
  <div>{{ count }}</div>
</template>

<script setup>
import { ref } from 'vue'

const count = ref(0)
</script>
"""

TEMPLATE_ONLY = """<template>
  <div>methods: { not code }</div>
</template>
"""

UNCLASSIFIED = """<template>
  <div class="widget"></div>
</template>

<script>
import register from './register'
register(document.querySelector('.widget'))
</script>
"""

PLAIN_TEXT = "nothing to see here\n"


@pytest.fixture
def options_low_sfc():
    """Options component with only a data function (score 0)."""
    return OPTIONS_LOW


@pytest.fixture
def options_medium_sfc():
    """Options component scoring 11: one hook and three methods."""
    return OPTIONS_MEDIUM


@pytest.fixture
def options_high_sfc():
    """Options component exercising every weighted signal (score 91)."""
    return OPTIONS_HIGH


@pytest.fixture
def composition_sfc():
    """<script setup> component."""
    return COMPOSITION_SETUP


@pytest.fixture
def template_only_sfc():
    """Markup only, with options-looking text inside the template."""
    return TEMPLATE_ONLY


@pytest.fixture
def unclassified_sfc():
    """Script region with no recognised signal."""
    return UNCLASSIFIED


@pytest.fixture
def plain_text_sfc():
    """No template, no script, no signal."""
    return PLAIN_TEXT


@pytest.fixture
def make_tree(tmp_path):
    """Write {relative_path: content} into tmp_path and return the root."""

    def _make(files: dict) -> Path:
        for relative, content in files.items():
            target = tmp_path / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def vue_project():
    """Checked-in sample project.

    Counts without a blacklist: 9 files, 4 options, 2 composition,
    1 template-only, 1 unclassified, 1 uncategorised (empty file).
    """
    return FIXTURES / "vue_project"
