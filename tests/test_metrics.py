from datetime import date
from math import isfinite

import pytest

from leasedeck.demo_scenarios import base_scenario
from leasedeck.engine import analyze_scenario, build_annual_cashflow
from leasedeck.engine.metrics import (
    average_annual_return,
    cash_on_cash_return,
    compute_metrics,
    concession_outlay,
    effective_rent_psf,
    irr,
    lease_term_years,
    npv,
    payback_period,
    roi,
)
from leasedeck.models import AnnualCashflowLine, KeyDates, LeaseScenario, RentPeriod


def _worked() -> LeaseScenario:
    return LeaseScenario(
        name="Worked Scenario",
        rsf=10000,
        lease_type="NNN",
        key_dates=KeyDates(commencement=date(2026, 1, 1), expiration=date(2027, 12, 31)),
        rent_schedule=[
            RentPeriod(
                period_start=date(2026, 1, 1),
                period_end=date(2027, 12, 31),
                rent_psf=50,
                escalation_percentage=0.05,
                free_rent_months=3,
            )
        ],
        cashflow_settings={"discount_rate": 0.10},
    )


def _line(year: int, ncf: float) -> AnnualCashflowLine:
    return AnnualCashflowLine(year=year, base_rent=ncf, subtotal=ncf, net_cash_flow=ncf)


def test_npv_discounts_first_year_once() -> None:
    lines = [_line(2026, 110.0), _line(2027, 121.0)]
    assert npv(lines, 0.10) == pytest.approx(200.0)


def test_npv_at_zero_rate_is_sum() -> None:
    lines = [_line(2026, 100.0), _line(2027, 250.0), _line(2028, -50.0)]
    assert npv(lines, 0.0) == pytest.approx(300.0)


def test_npv_of_no_lines_is_zero() -> None:
    assert npv([], 0.08) == 0


def test_worked_scenario_metrics() -> None:
    scenario = _worked()
    lines = build_annual_cashflow(scenario)
    assert npv(lines, 0.10) == pytest.approx(774793.39, abs=0.01)
    assert effective_rent_psf(lines, scenario.rsf, 2) == pytest.approx(45.0)

    metrics = compute_metrics(lines, scenario)
    assert metrics.total_years == 2.0
    assert metrics.effective_rate == pytest.approx(45.0)
    assert metrics.npv == pytest.approx(774793.39, abs=0.01)


def test_effective_rent_floors_degenerate_denominators() -> None:
    lines = [_line(2026, 1200.0)]
    assert effective_rent_psf(lines, 0, 0) == pytest.approx(1200.0)
    assert effective_rent_psf(lines, 0.5, 1) == pytest.approx(1200.0)
    assert effective_rent_psf([], 0, 0) == 0


def test_metrics_are_finite_for_degenerate_inputs() -> None:
    scenario = _worked().model_copy(update={"rsf": 0})
    result = analyze_scenario(scenario)
    assert isfinite(result.metrics.npv)
    assert isfinite(result.metrics.effective_rate)
    assert isfinite(effective_rent_psf(result.lines, 0, 0))


def _mid_year_flat() -> LeaseScenario:
    return LeaseScenario(
        name="Mid-year flat NNN",
        rsf=1000,
        lease_type="NNN",
        key_dates=KeyDates(commencement=date(2026, 7, 1), expiration=date(2031, 6, 30)),
        rent_schedule=[
            RentPeriod(period_start=date(2026, 7, 1), period_end=date(2031, 6, 30), rent_psf=40)
        ],
    )


def test_lease_term_years_is_actual_term_not_calendar_span() -> None:
    assert lease_term_years(_worked()) == 2.0
    assert lease_term_years(base_scenario()) == 10.0
    # six calendar years touched, five years of term
    assert lease_term_years(_mid_year_flat()) == 5.0


def test_lease_term_years_counts_partial_terms_in_months() -> None:
    scenario = _worked().model_copy(
        update={"key_dates": KeyDates(commencement=date(2026, 1, 15), expiration=date(2027, 7, 14))}
    )
    assert lease_term_years(scenario) == pytest.approx(1.5)


def test_lease_term_years_is_zero_for_inverted_dates() -> None:
    inverted = _worked().model_copy(
        update={"key_dates": KeyDates(commencement=date(2030, 1, 1), expiration=date(2026, 1, 1))}
    )
    assert lease_term_years(inverted) == 0


def test_mid_year_lease_effective_rent_matches_flat_rate() -> None:
    result = analyze_scenario(_mid_year_flat())
    assert [line.year for line in result.lines] == [2026, 2027, 2028, 2029, 2030, 2031]
    assert sum(line.net_cash_flow for line in result.lines) == pytest.approx(200000.0)
    assert result.metrics.total_years == 5.0
    assert result.metrics.effective_rate == pytest.approx(40.0)


def test_analyze_scenario_returns_lines_and_metrics() -> None:
    result = analyze_scenario(_worked())
    assert [line.year for line in result.lines] == [2026, 2027]
    assert result.metrics.npv == pytest.approx(774793.39, abs=0.01)
    assert result.metrics.effective_rate == pytest.approx(45.0)
    assert result.metrics.total_years == 2.0


def test_demo_scenario_metrics_match_hand_computed_values() -> None:
    # 2026 net: 960,000 base + 86,400 parking - 480,000 rent credit - 180,000 opex credit
    result = analyze_scenario(base_scenario())
    assert len(result.lines) == 10
    assert result.lines[0].net_cash_flow == pytest.approx(386400.0)
    assert result.lines[-1].net_cash_flow == pytest.approx(1314732.1031, abs=1e-3)
    assert sum(line.net_cash_flow for line in result.lines) == pytest.approx(11052450.8725, abs=1e-3)

    metrics = result.metrics
    assert metrics.total_years == 10.0
    assert metrics.npv == pytest.approx(7127512.6235, abs=0.01)
    assert metrics.effective_rate == pytest.approx(55.262254, abs=1e-5)


def test_demo_scenario_return_metrics() -> None:
    metrics = analyze_scenario(base_scenario()).metrics
    assert metrics.initial_investment == pytest.approx(1750000.0)
    assert metrics.cash_on_cash_return == pytest.approx(6.3156862, abs=1e-6)
    assert metrics.roi == pytest.approx(5.3156862, abs=1e-6)
    assert metrics.average_annual_return == pytest.approx(1105245.08725, abs=1e-4)
    # outlay recovered during the third year: 2 + 285,808 / 1,110,125.76
    assert metrics.payback_period == pytest.approx(2.2574555, abs=1e-6)
    assert metrics.irr == pytest.approx(0.8085455, abs=1e-6)


def test_worked_scenario_without_concessions_has_no_irr() -> None:
    metrics = analyze_scenario(_worked()).metrics
    assert concession_outlay(_worked()) == 0
    assert metrics.initial_investment == 0
    assert metrics.irr is None
    assert metrics.payback_period == 0
    assert metrics.cash_on_cash_return == 0
    assert metrics.roi == 0
    assert metrics.average_annual_return == pytest.approx(450000.0)


def _series(*flows: float) -> list[AnnualCashflowLine]:
    return [_line(2024 + i, f) for i, f in enumerate(flows)]


def test_irr_converges_on_known_series() -> None:
    lines = _series(-100000, 30000, 30000, 30000, 30000)
    rate = irr(lines)
    assert rate == pytest.approx(0.0771385, abs=1e-6)
    assert npv(lines, rate) == pytest.approx(0.0, abs=1e-4)


def test_irr_of_zero_flows_returns_guess() -> None:
    assert irr(_series(0, 0)) == 0.1
    assert irr([], guess=0.05) == 0.05


def test_payback_period_interpolates_within_crossing_year() -> None:
    assert payback_period(_series(-100000, 50000, 50000, 50000)) == pytest.approx(3.0)
    assert payback_period(_series(-100000, 40000, 80000)) == pytest.approx(2.75)


def test_payback_period_never_paying_back_returns_line_count() -> None:
    lines = _series(-100000, 10000, 10000)
    assert payback_period(lines) == len(lines)


def test_payback_period_of_no_lines_is_zero() -> None:
    assert payback_period([]) == 0


def test_cash_on_cash_and_roi_use_absolute_investment() -> None:
    lines = _series(-100000, 25000, 25000)
    assert cash_on_cash_return(lines, -100000) == pytest.approx(-0.5)
    assert roi(_series(-100000, 150000), -100000) == pytest.approx(1.5)
    assert roi(_series(100000, 150000), 100000) == pytest.approx(1.5)


def test_zero_investment_returns_zero() -> None:
    lines = _series(-100000, 25000, 25000)
    assert cash_on_cash_return(lines, 0) == 0
    assert roi(lines, 0) == 0


def test_average_annual_return() -> None:
    assert average_annual_return(_series(10000, 20000, 30000)) == pytest.approx(20000.0)
    assert average_annual_return([]) == 0

