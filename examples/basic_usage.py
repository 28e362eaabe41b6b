#!/usr/bin/env python3
"""
Basic todolint Usage Examples

Copy-paste these examples to get started quickly.
"""

# =============================================================================
# EXAMPLE 1: Quick Check of Extracted Comments
# =============================================================================

from todolint import Comment, CommentKind, LintPipeline

# Disable package.json discovery so results do not depend on the cwd
pipeline = LintPipeline(discover_url=False)

comments = [
    Comment(kind=CommentKind.LINE, text=" TODO: refactor this", line=3, source="app.js"),
    Comment(kind=CommentKind.BLOCK, text=" FIXME handle empty input ", line=9, source="app.js"),
    Comment(kind=CommentKind.LINE, text=" the mastodon client", line=12, source="app.js"),
]
report = pipeline.analyze(comments)

for diagnostic in report.diagnostics:
    print(diagnostic)            # app.js:3: Undocumented TODO: refactor this
print(report.summary)
print()

# =============================================================================
# EXAMPLE 2: Exempting Comments That Link to the Tracker
# =============================================================================

pipeline = LintPipeline(url="https://github.com/acme/widgets/issues", discover_url=False)

for text in [
    " TODO: see https://github.com/acme/widgets/issues/42",
    " TODO: see the wiki",
]:
    report = pipeline.analyze_text(text)
    print(f"{text!r}: flagged={report.flagged}")
print()

# =============================================================================
# EXAMPLE 3: Matching Terms Anywhere in a Comment
# =============================================================================

from todolint import UndocumentedTodoRule

rule = UndocumentedTodoRule(terms=["fixme", "hack"], location="anywhere")
finding = rule.check(Comment(kind=CommentKind.LINE, text=" quick hack until v2"))
if finding is not None:
    print(UndocumentedTodoRule.format_message(finding))   # Undocumented TODO: quick  until v2
print()

# =============================================================================
# EXAMPLE 4: Scanning Python Sources
# =============================================================================

source = '''#!/usr/bin/env python
# TODO: split this module
x = 1  # xxx magic number
'''
report = LintPipeline(discover_url=False).analyze_source(source, source="mod.py")
print(report.to_dict())
