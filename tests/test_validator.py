"""Tests for the constraint rules and the validator."""
import pytest

from configurator.models import ContainerConfig, Valid, Invalid
from configurator.core.registry import RuleRegistry, create_default_registry
from configurator.core.validator import ConstraintValidator
from configurator.rules.shell import WallThicknessRule
from configurator.rules.frame import PocketWidthRule, FrameHeightRule
from configurator.rules.lid import max_hole_radius


# Each case violates exactly one invariant.
SINGLE_VIOLATIONS = [
    ("shell.positive_dimensions", dict(L_rect=-5, x_hopper=50)),
    ("shell.positive_dimensions", dict(t_wall=0)),
    ("shell.wall_thickness", dict(t_wall=700)),
    ("shell.hopper_length", dict(x_hopper=1500)),
    ("shell.hopper_length", dict(x_hopper=-10)),
    ("frame.height", dict(H_frame=900)),
    ("frame.pocket_width", dict(W_pocket=700)),
    ("frame.pocket_width", dict(S_pocket=1200)),
    ("lid.hole_radius", dict(include_lid=True, lid_edge_length=700, r_hole=900)),
    ("lid.hole_radius", dict(include_lid=True, r_hole=600)),
]


class TestValidate:

    def test_defaults_are_valid(self, validator, default_config):
        assert isinstance(validator.validate(default_config), Valid)

    @pytest.mark.parametrize("rule_id,overrides", SINGLE_VIOLATIONS)
    def test_violation_is_reported(self, validator, rule_id, overrides):
        result = validator.validate(ContainerConfig(**overrides))
        assert isinstance(result, Invalid)
        assert result.rule_id == rule_id
        assert result.message
        assert result.offending_fields

    @pytest.mark.parametrize("rule_id,overrides", SINGLE_VIOLATIONS)
    def test_remedy_then_revalidate_is_valid(self, validator, rule_id, overrides):
        candidate = ContainerConfig(**overrides)
        failure = validator.validate(candidate)
        fixed = failure.apply_remedy(candidate)
        assert isinstance(validator.validate(fixed), Valid)

    def test_only_first_failure_is_reported(self, validator):
        """Positivity is checked before wall thickness and hopper length."""
        candidate = ContainerConfig(H=0, t_wall=700, x_hopper=5000)
        result = validator.validate(candidate)
        assert result.rule_id == "shell.positive_dimensions"

    def test_wall_checked_before_hopper(self, validator):
        result = validator.validate(ContainerConfig(t_wall=700, x_hopper=5000))
        assert result.rule_id == "shell.wall_thickness"

    def test_frame_rules_skipped_without_frame(self, validator):
        candidate = ContainerConfig(include_frame=False, H_frame=5000, W_pocket=5000)
        assert isinstance(validator.validate(candidate), Valid)

    def test_lid_rule_skipped_without_lid(self, validator):
        candidate = ContainerConfig(include_lid=False, r_hole=10_000)
        assert isinstance(validator.validate(candidate), Valid)

    def test_unlock_pockets_is_not_a_constraint(self, validator):
        assert isinstance(validator.validate(ContainerConfig(unlock_pockets=True)), Valid)


class TestRemedies:

    def test_wall_remedy_caps_at_quarter_of_shortest_side(self, validator):
        candidate = ContainerConfig(t_wall=700, W=1300, L_rect=1400)
        result = validator.validate(candidate)
        assert result.rule_id == "shell.wall_thickness"
        assert result.offending_fields == frozenset({"t_wall"})
        assert result.apply_remedy(candidate).t_wall == 325

    def test_wall_remedy_on_tiny_body(self):
        rule = WallThicknessRule()
        candidate = ContainerConfig(L_rect=3, W=3, t_wall=2, x_hopper=0)
        assert rule.violated(candidate)
        assert not rule.violated(rule.remedy(candidate))

    def test_positive_dimensions_remedy(self, validator):
        candidate = ContainerConfig(L_rect=-5, H=0, W=1300, t_wall=-1)
        fixed = validator.validate(candidate).apply_remedy(candidate)
        assert fixed.L_rect == 100
        assert fixed.H == 100
        assert fixed.W == 1300
        assert fixed.t_wall == 2

    def test_hopper_remedy_clamps(self, validator):
        candidate = ContainerConfig(x_hopper=1500)
        assert validator.validate(candidate).apply_remedy(candidate).x_hopper == 1400

    def test_frame_height_remedy(self, validator):
        candidate = ContainerConfig(H_frame=950)
        assert validator.validate(candidate).apply_remedy(candidate).H_frame == 300

    def test_frame_height_remedy_on_low_container(self):
        rule = FrameHeightRule()
        candidate = ContainerConfig(H=20, H_frame=25)
        assert not rule.violated(rule.remedy(candidate))

    def test_pocket_remedy(self, validator):
        candidate = ContainerConfig(W_pocket=700)
        fixed = validator.validate(candidate).apply_remedy(candidate)
        # floor((1300 - 40 - 142) / 2)
        assert fixed.W_pocket == 559
        assert fixed.S_pocket == 142

    def test_pocket_remedy_on_narrow_container(self):
        rule = PocketWidthRule()
        candidate = ContainerConfig(W=200, W_pocket=100, S_pocket=100)
        fixed = rule.remedy(candidate)
        assert not rule.violated(fixed)
        assert fixed.W_pocket < 50

    def test_pocket_remedy_when_margins_exceed_width(self, validator):
        candidate = ContainerConfig(W=30, t_wall=5, x_hopper=0, include_frame=True)
        result = validator.validate(candidate)
        assert isinstance(result, Invalid)
        assert result.rule_id == "frame.pocket_width"

        fixed = result.apply_remedy(candidate)
        assert fixed.W == 40
        assert fixed.W_pocket == 0
        assert fixed.S_pocket == 0
        assert isinstance(validator.validate(fixed), Valid)

    def test_lid_remedy_uses_computed_maximum(self, validator):
        candidate = ContainerConfig(
            include_lid=True, lid_edge_length=700, r_hole=900, W=1300, L_rect=1400,
        )
        result = validator.validate(candidate)
        assert isinstance(result, Invalid)
        assert result.rule_id == "lid.hole_radius"
        fixed = result.apply_remedy(candidate)
        assert fixed.r_hole == max_hole_radius(candidate) == 20

    def test_remedy_leaves_candidate_untouched(self, validator):
        candidate = ContainerConfig(x_hopper=1500)
        validator.validate(candidate).apply_remedy(candidate)
        assert candidate.x_hopper == 1500

    def test_remedy_changes_only_its_fields(self, validator):
        candidate = ContainerConfig(x_hopper=1500, H=1200, fill_percentage=35)
        fixed = validator.validate(candidate).apply_remedy(candidate)
        assert fixed.model_dump(exclude={"x_hopper"}) == candidate.model_dump(exclude={"x_hopper"})


class TestRegistry:

    def test_default_order(self):
        ids = [r.get_id() for r in create_default_registry().list_rules()]
        assert ids == [
            "shell.positive_dimensions",
            "shell.wall_thickness",
            "shell.hopper_length",
            "frame.height",
            "frame.pocket_width",
            "lid.hole_radius",
        ]

    def test_unregister_disables_rule(self):
        registry = create_default_registry()
        registry.unregister("shell.hopper_length")
        validator = ConstraintValidator(registry)
        assert isinstance(validator.validate(ContainerConfig(x_hopper=5000)), Valid)

    def test_empty_registry_accepts_everything(self):
        validator = ConstraintValidator(RuleRegistry())
        assert isinstance(validator.validate(ContainerConfig(L_rect=-1)), Valid)
