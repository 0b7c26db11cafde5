from swift_lint.rules.redundant_type_annotation import RedundantTypeAnnotationRule

RULES = {RedundantTypeAnnotationRule.description.identifier: RedundantTypeAnnotationRule}

__all__ = ["RULES", "RedundantTypeAnnotationRule"]
