"""JavaScript snippets evaluated inside the captured page."""

# Removes every element matching any selector; invalid selectors are skipped.
REMOVE_ELEMENTS_JS = """
(selectors) => {
  let removed = 0;
  for (const sel of selectors) {
    try {
      for (const el of Array.from(document.querySelectorAll(sel))) {
        el.remove();
        removed += 1;
      }
    } catch (e) {
      // invalid selector
    }
  }
  return removed;
}
"""

# Hides sibling subtrees on the path to the root (visibility keeps layout),
# resolves the nearest explicit background color, clears html/body
# backgrounds and returns the scroll-adjusted rect, or null.
ISOLATE_ELEMENT_JS = """
(sel) => {
  const target = document.querySelector(sel);
  if (!target) return null;

  let el = target;
  while (el && el !== document.body) {
    const parent = el.parentElement;
    if (parent) {
      for (const child of Array.from(parent.children)) {
        if (child !== el) {
          child.style.cssText += ";visibility:hidden!important;";
        }
      }
    }
    el = parent;
  }

  let backgroundColor = "rgb(255, 255, 255)";
  let bgEl = target;
  while (bgEl) {
    const computed = window.getComputedStyle(bgEl).backgroundColor;
    if (computed && computed !== "rgba(0, 0, 0, 0)" && computed !== "transparent") {
      backgroundColor = computed;
      break;
    }
    bgEl = bgEl.parentElement;
  }

  document.documentElement.style.cssText = "margin:0;padding:0;background:transparent;";
  document.body.style.cssText = "margin:0;padding:0;background:transparent;";

  const r = target.getBoundingClientRect();
  return {
    left: r.left + window.scrollX,
    top: r.top + window.scrollY,
    right: r.right + window.scrollX,
    bottom: r.bottom + window.scrollY,
    width: r.width,
    height: r.height,
    fullWidth: document.documentElement.scrollWidth,
    fullHeight: document.documentElement.scrollHeight,
    backgroundColor: backgroundColor,
  };
}
"""

GRADIENT_MARKER = "data-pageframe-gradient"

# Tags every element with a gradient background and returns [id, backgroundImage] pairs.
COLLECT_GRADIENTS_JS = """
(marker) => {
  const found = [];
  let id = 0;
  for (const el of Array.from(document.querySelectorAll("*"))) {
    const bg = window.getComputedStyle(el).backgroundImage;
    if (bg && bg.includes("gradient")) {
      el.setAttribute(marker, String(id));
      found.push([String(id), bg]);
      id += 1;
    }
  }
  return found;
}
"""

# Writes rewritten backgroundImage values back by marker id.
APPLY_GRADIENTS_JS = """
([marker, updates]) => {
  let applied = 0;
  for (const [id, bg] of updates) {
    const el = document.querySelector(`[${marker}="${id}"]`);
    if (el) {
      el.style.backgroundImage = bg;
      applied += 1;
    }
  }
  return applied;
}
"""
