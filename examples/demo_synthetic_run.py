import random

from crossover_sim.config import StrategyConfig
from crossover_sim.data import SyntheticPathGenerator
from crossover_sim.reporting import format_price_table, format_trade
from crossover_sim.simulator import PortfolioSimulator, compute_run_summary
from crossover_sim.strategy import moving_average_series


strategy = StrategyConfig(short_period=5, long_period=20)
generator = SyntheticPathGenerator(rng=random.Random(7))
series = generator.generate(60)

closes = series.closes
print("Price Data and Moving Averages:")
print(
    format_price_table(
        series,
        moving_average_series(closes, strategy.short_period),
        moving_average_series(closes, strategy.long_period),
    )
)
print()

result = PortfolioSimulator(strategy).run(series, initial_balance=10000.0)
for trade in result.trades:
    print(format_trade(trade))

summary = compute_run_summary(result)
print("Final Balance:", round(summary.final_balance, 2))
print("Return %:", round(summary.total_return_pct, 2))
print("Open position at end:", result.final_position.value)
