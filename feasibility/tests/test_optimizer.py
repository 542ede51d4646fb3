"""
Unit tests for the plan optimizer.

Tests the three optimizer policies, the optimize entry point, the helpers
for choosing and applying a candidate, and plan cloning.
"""

import pytest

from feasibility.optimizer.clone import clone_plan
from feasibility.optimizer.config import DEFAULT_OPTIMIZER_CONFIG
from feasibility.optimizer.optimizer import (
    apply_optimized_plan,
    can_optimize,
    format_optimization_summary,
    get_best_optimization,
    optimize,
)
from feasibility.optimizer.strategies import (
    generate_balanced_plan,
    generate_budget_plan,
    generate_relaxed_plan,
)
from feasibility.scorer.scoring import evaluate
from feasibility.shared.contracts import OptimizationChange, TripDay
from feasibility.shared.errors import InvalidPlanError
from feasibility.tests.sample_data import (
    create_sample_trip,
    day_date,
    make_activity,
    make_day,
    make_overloaded_plan,
    make_plan,
)


class TestOptimize:
    """Tests for the optimize entry point."""

    def test_feasible_plan_gets_no_alternatives(self, balanced_plan):
        """A score of 85 or more returns an empty list."""
        result = evaluate(balanced_plan)
        assert optimize(balanced_plan, result) == []

    def test_threshold_is_inclusive(self, overloaded_plan):
        """A result of exactly 85 is already feasible."""
        result = evaluate(overloaded_plan).model_copy(update={"percentage": 85})
        assert optimize(overloaded_plan, result) == []

    def test_generates_three_candidates(self, overloaded_plan):
        """A low-scoring plan with movable activities gets all three policies."""
        result = evaluate(overloaded_plan)
        assert result.percentage == 80

        candidates = optimize(overloaded_plan, result)

        assert [c.id for c in candidates] == ["balanced", "relaxed", "budget"]
        assert [c.possibility.percentage for c in candidates] == [85, 90, 90]
        assert [c.improvement_percentage for c in candidates] == [5, 10, 10]

    def test_balanced_discarded_without_improvement(self):
        """With nothing movable the balanced plan is dropped."""
        plan = make_overloaded_plan(droppable=False)
        result = evaluate(plan)

        candidates = optimize(plan, result)

        assert [c.id for c in candidates] == ["relaxed", "budget"]
        budget = candidates[1]
        assert budget.changes == []
        assert budget.improvement_percentage == 0
        assert budget.possibility.percentage == result.percentage

    def test_input_plan_not_mutated(self, overloaded_plan):
        """Optimizing never changes the caller's plan."""
        snapshot = overloaded_plan.model_copy(deep=True).model_dump()
        result = evaluate(overloaded_plan)

        optimize(overloaded_plan, result)

        assert overloaded_plan.model_dump() == snapshot

    def test_candidates_share_no_state_with_input(self, overloaded_plan):
        result = evaluate(overloaded_plan)
        for candidate in optimize(overloaded_plan, result):
            assert candidate.trip_data is not overloaded_plan
            for original_day, new_day in zip(overloaded_plan.days, candidate.trip_data.days):
                assert new_day is not original_day
                assert new_day.activities is not original_day.activities

    def test_rescoring_candidates_is_idempotent(self, overloaded_plan):
        """A candidate's stored score matches re-evaluating its plan."""
        result = evaluate(overloaded_plan)
        for candidate in optimize(overloaded_plan, result):
            rescored = evaluate(candidate.trip_data)
            assert rescored.percentage == candidate.possibility.percentage

    @pytest.mark.parametrize("seed", range(8))
    def test_properties_hold_for_sample_trips(self, seed):
        """Random overloaded trips keep the optimizer's guarantees."""
        plan = create_sample_trip(
            days=5, cities=2, budget=40000.0, overloaded=True,
            over_budget=seed % 2 == 1, seed=seed,
        )
        snapshot = plan.model_dump()
        result = evaluate(plan)

        candidates = optimize(plan, result)

        assert plan.model_dump() == snapshot
        for candidate in candidates:
            assert evaluate(candidate.trip_data).percentage == candidate.possibility.percentage
            assert candidate.improvement_percentage >= 0
            if candidate.id == "balanced":
                assert candidate.possibility.percentage > result.percentage

    def test_invalid_plan_rejected(self, overloaded_plan):
        result = evaluate(overloaded_plan)
        broken = overloaded_plan.model_copy(update={"cities": []})
        with pytest.raises(InvalidPlanError):
            optimize(broken, result)


class TestBalancedPlan:
    """Tests for the balanced policy."""

    def test_moves_last_droppable_activity_to_lightest_day(self, overloaded_plan):
        result = evaluate(overloaded_plan)

        candidate = generate_balanced_plan(overloaded_plan, result)

        assert candidate is not None
        move = candidate.changes[0]
        assert move.type == "move_activity"
        assert move.activity_id == "d0-a6"
        assert move.day_index == 0
        assert move.description == 'Move "Activity 7" from Day 1 to Day 2'

        days = candidate.trip_data.days
        assert [a.id for a in days[0].activities][-1] == "d0-a5"
        assert days[1].activities[-1].id == "d0-a6"
        assert days[0].total_cost == 600.0
        assert days[0].total_duration == 6.0
        assert days[1].total_cost == 300.0
        assert days[1].total_duration == 3.0

    def test_total_spend_unchanged(self, overloaded_plan):
        """Moving keeps every activity in the plan."""
        result = evaluate(overloaded_plan)
        candidate = generate_balanced_plan(overloaded_plan, result)
        assert candidate.trip_data.total_spent == overloaded_plan.total_spent
        assert sum(len(d.activities) for d in candidate.trip_data.days) == 15

    def test_records_merge_for_sightseeing_heavy_days(self, overloaded_plan):
        """Days with 3+ sightseeing activities get a descriptive merge change."""
        result = evaluate(overloaded_plan)
        candidate = generate_balanced_plan(overloaded_plan, result)
        merges = [c for c in candidate.changes if c.type == "merge_activities"]
        assert [c.day_index for c in merges] == [0, 1, 2, 3]

    def test_packaging(self, overloaded_plan):
        result = evaluate(overloaded_plan)
        candidate = generate_balanced_plan(overloaded_plan, result)
        assert candidate.name == "Balanced Plan"
        assert candidate.icon == "⭐"
        assert candidate.color == "primary"
        assert len(candidate.tradeoffs) == 4

    def test_no_light_day_means_no_move(self):
        """Without a day under 4 activities nothing is moved."""
        days = [make_day(0, 7, priority="low")] + [make_day(i, 4) for i in range(1, 4)]
        plan = make_plan(days, total_budget=1000.0, cities=["A", "B"])
        result = evaluate(plan)

        assert generate_balanced_plan(plan, result) is None


class TestRelaxedPlan:
    """Tests for the relaxed policy."""

    def test_pops_last_activity_of_longest_day(self, overloaded_plan):
        result = evaluate(overloaded_plan)

        candidate = generate_relaxed_plan(overloaded_plan, result)

        assert candidate.changes[0].type == "add_rest"
        assert candidate.changes[0].description == "Add free evening on Day 1"
        heavy_day = candidate.trip_data.days[0]
        assert len(heavy_day.activities) == 6
        assert heavy_day.total_duration == 6.0
        assert heavy_day.total_cost == 600.0

    def test_flags_consecutive_heavy_days(self):
        """The second and later days of a run over 8 hours get a rest change."""
        plan = make_plan([make_day(i, 3, duration=3.0) for i in range(3)])
        result = evaluate(plan)

        candidate = generate_relaxed_plan(plan, result)

        assert [c.description for c in candidate.changes] == [
            "Add lighter schedule on Day 2",
            "Add lighter schedule on Day 3",
        ]
        assert candidate.trip_data.model_dump() == plan.model_dump()

    def test_always_returned_with_floored_improvement(self):
        plan = make_plan([make_day(i, 3, duration=3.0) for i in range(3)])
        result = evaluate(plan)
        candidate = generate_relaxed_plan(plan, result)
        assert candidate is not None
        assert candidate.improvement_percentage == 0

    def test_budget_note_uses_currency(self):
        plan = make_plan([make_day(0, 2)], currency="INR")
        candidate = generate_relaxed_plan(plan, evaluate(plan))
        assert candidate.tradeoffs[-1] == "Budget may increase by ~INR 1,200"
        assert candidate.icon == "🌿"
        assert candidate.color == "success"


class TestBudgetPlan:
    """Tests for the budget-optimized policy."""

    def _expensive_day_plan(self):
        expensive = TripDay.from_activities(
            day_date(0),
            [
                make_activity("museum", name="Museum", cost=200.0, priority="high"),
                make_activity("spa", name="Spa", cost=500.0, priority="low"),
                make_activity("snack", name="Snack", cost=50.0, is_optional=True),
            ],
            city_id="city-a",
        )
        cheap = TripDay.from_activities(
            day_date(1),
            [
                make_activity("walk", name="Walk", cost=100.0),
                make_activity("cafe", name="Cafe", cost=50.0, is_optional=True),
            ],
            city_id="city-a",
        )
        return make_plan([expensive, cheap], total_budget=1000.0)

    def test_removes_most_expensive_optional_on_expensive_day(self):
        plan = self._expensive_day_plan()

        candidate = generate_budget_plan(plan, evaluate(plan))

        assert len(candidate.changes) == 1
        change = candidate.changes[0]
        assert change.type == "remove_activity"
        assert change.activity_id == "spa"
        assert change.impact == "Saves 500"
        day = candidate.trip_data.days[0]
        assert [a.id for a in day.activities] == ["museum", "snack"]
        assert day.total_cost == 250.0

    def test_days_within_allotment_untouched(self):
        plan = self._expensive_day_plan()
        candidate = generate_budget_plan(plan, evaluate(plan))
        assert [a.id for a in candidate.trip_data.days[1].activities] == ["walk", "cafe"]
        assert len(plan.days[0].activities) == 3

    def test_tradeoffs_report_savings(self, overloaded_plan):
        candidate = generate_budget_plan(overloaded_plan, evaluate(overloaded_plan))
        assert candidate.tradeoffs[0] == "✓ Saves 100"
        assert candidate.tradeoffs[-1] == "1 optional activities removed"
        assert candidate.icon == "💰"
        assert candidate.color == "warning"


class TestHelpers:
    """Tests for apply, best-choice, can_optimize and summaries."""

    def test_apply_returns_candidate_plan(self, overloaded_plan):
        candidates = optimize(overloaded_plan, evaluate(overloaded_plan))
        assert apply_optimized_plan(candidates[0]) is candidates[0].trip_data

    def test_best_is_highest_score_first_on_ties(self, overloaded_plan):
        """relaxed and budget both reach 90; relaxed comes first."""
        candidates = optimize(overloaded_plan, evaluate(overloaded_plan))
        best = get_best_optimization(candidates)
        assert best.id == "relaxed"

    def test_best_of_empty_is_none(self):
        assert get_best_optimization([]) is None

    def test_can_optimize(self, overloaded_plan, balanced_plan):
        low = evaluate(overloaded_plan)
        assert can_optimize(low) is True
        assert can_optimize(evaluate(balanced_plan)) is False
        assert can_optimize(low.model_copy(update={"issues": []})) is False

    def test_summary_format(self, overloaded_plan):
        candidates = optimize(overloaded_plan, evaluate(overloaded_plan))
        balanced = candidates[0]
        assert format_optimization_summary(balanced) == "5 changes • +5% improvement"

        single = balanced.model_copy(
            update={
                "changes": [
                    OptimizationChange(
                        type="add_rest", description="Rest", impact="Less fatigue"
                    )
                ]
            }
        )
        assert format_optimization_summary(single) == "1 change • +5% improvement"

    def test_default_config(self):
        assert DEFAULT_OPTIMIZER_CONFIG.FEASIBLE_THRESHOLD == 85
        assert DEFAULT_OPTIMIZER_CONFIG.MAX_ACTIVITIES_PER_DAY == 4


class TestClonePlan:
    """Tests for structural plan cloning."""

    def test_clone_is_equal_but_independent(self, overloaded_plan):
        copy = clone_plan(overloaded_plan)

        assert copy.model_dump() == overloaded_plan.model_dump()
        assert copy is not overloaded_plan
        assert copy.cities is not overloaded_plan.cities
        assert copy.days is not overloaded_plan.days

    def test_mutating_clone_leaves_original(self, overloaded_plan):
        copy = clone_plan(overloaded_plan)

        copy.days[0].activities.pop()
        copy.days[0].total_cost = 0.0
        copy.days[1].activities[0].cost = 999.0
        copy.cities.append("Z")

        assert len(overloaded_plan.days[0].activities) == 7
        assert overloaded_plan.days[0].total_cost == 700.0
        assert overloaded_plan.days[1].activities[0].cost == 100.0
        assert overloaded_plan.cities == ["A", "B"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
