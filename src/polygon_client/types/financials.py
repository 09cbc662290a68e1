#!/usr/bin/env python
"""Response types for the financial statement endpoints.

Two generations of the API are covered:

* ``v2/reference/financials/{stocks_ticker}`` returns flat, camelCase
  statement rows where almost every figure may be missing.
* ``vX/reference/financials`` returns XBRL-derived filings whose statements are
  maps from a concept key (see ``FUNDAMENTAL_ACCOUNTING_CONCEPTS``) to a
  ``FundamentalAccountingConcept``.
"""

from __future__ import annotations

from pydantic import Field

from polygon_client.types.base import PolygonModel

__all__ = [
    "FAC_ASSETS",
    "FAC_EQUITY",
    "FAC_GROSS_PROFIT",
    "FAC_LIABILITIES",
    "FAC_NET_CASH_FLOW",
    "FAC_NET_INCOME_LOSS",
    "FAC_OPERATING_INCOME_LOSS",
    "FAC_REVENUES",
    "FUNDAMENTAL_ACCOUNTING_CONCEPTS",
    "FinancialDimensions",
    "FundamentalAccountingConcept",
    "ReferenceStockFinancialsResponse",
    "ReferenceStockFinancialsResult",
    "ReferenceStockFinancialsVXResponse",
    "ReferenceStockFinancialsVXResult",
]


# v2/reference/financials/{stocks_ticker}


class ReferenceStockFinancialsResult(PolygonModel):
    """One reported period for a ticker."""

    ticker: str
    period: str
    calendar_date: str = Field(alias="calendarDate")
    report_period: str = Field(alias="reportPeriod")
    updated: str
    accumulated_other_comprehensive_income: int | None = Field(default=None, alias="accumulatedOtherComprehensiveIncome")
    assets: int | None = None
    assets_average: int | None = Field(default=None, alias="assetsAverage")
    assets_current: int | None = Field(default=None, alias="assetsCurrent")
    asset_turnover: float | None = Field(default=None, alias="assetTurnover")
    assets_non_current: int | None = Field(default=None, alias="assetsNonCurrent")
    book_value_per_share: float | None = Field(default=None, alias="bookValuePerShare")
    capital_expenditure: int | None = Field(default=None, alias="capitalExpenditure")
    cash_and_equivalents: int | None = Field(default=None, alias="cashAndEquivalents")
    cash_and_equivalents_usd: int | None = Field(default=None, alias="cashAndEquivalentsUSD")
    cost_of_revenue: int | None = Field(default=None, alias="costOfRevenue")
    consolidated_income: int | None = Field(default=None, alias="consolidatedIncome")
    current_ratio: float | None = Field(default=None, alias="currentRatio")
    debt_to_equity_ratio: float | None = Field(default=None, alias="debtToEquityRatio")
    debt: int | None = None
    debt_current: int | None = Field(default=None, alias="debtCurrent")
    debt_non_current: int | None = Field(default=None, alias="debtNonCurrent")
    debt_usd: int | None = Field(default=None, alias="debtUSD")
    deferred_revenue: int | None = Field(default=None, alias="deferredRevenue")
    depreciation_amortization_and_accretion: int | None = Field(default=None, alias="depreciationAmortizationAndAccretion")
    deposits: int | None = None
    dividend_yield: float | None = Field(default=None, alias="dividendYield")
    dividends_per_basic_common_share: float | None = Field(default=None, alias="dividendsPerBasicCommonShare")
    earning_before_interest_taxes: int | None = Field(default=None, alias="earningBeforeInterestTaxes")
    earning_before_interest_taxes_usd: int | None = Field(default=None, alias="earningBeforeInterestTaxesUSD")
    earnings_before_interest_taxes_depreciation_amortization: int | None = Field(default=None, alias="earningsBeforeInterestTaxesDepreciationAmortization")
    earnings_before_interest_taxes_depreciation_amortization_usd: int | None = Field(default=None, alias="earningsBeforeInterestTaxesDepreciationAmortizationUSD")
    earnings_before_tax: int | None = Field(default=None, alias="earningsBeforeTax")
    earnings_per_basic_share: float | None = Field(default=None, alias="earningsPerBasicShare")
    earnings_per_basic_share_usd: float | None = Field(default=None, alias="earningsPerBasicShareUSD")
    earnings_per_diluted_share: float | None = Field(default=None, alias="earningsPerDilutedShare")
    ebitda_margin: float | None = Field(default=None, alias="EBITDAMargin")
    shareholders_equity: int | None = Field(default=None, alias="shareholdersEquity")
    shareholders_equity_usd: int | None = Field(default=None, alias="shareholdersEquityUSD")
    enterprise_value: int | None = Field(default=None, alias="enterpriseValue")
    enterprise_value_over_ebit: int | None = Field(default=None, alias="enterpriseValueOverEBIT")
    enterprise_value_over_ebitda: float | None = Field(default=None, alias="enterpriseValueOverEBITDA")
    free_cash_flow: int | None = Field(default=None, alias="freeCashFlow")
    free_cash_flow_per_share: float | None = Field(default=None, alias="freeCashFlowPerShare")
    foreign_currency_usd_exchange_rate: float | None = Field(default=None, alias="foreignCurrencyUSDExchangeRate")
    gross_profit: int | None = Field(default=None, alias="grossProfit")
    gross_margin: float | None = Field(default=None, alias="grossMargin")
    goodwill_and_intangible_assets: int | None = Field(default=None, alias="goodwillAndIntangibleAssets")
    interest_expense: int | None = Field(default=None, alias="interestExpense")
    invested_capital: int | None = Field(default=None, alias="investedCapital")
    inventory: int | None = None
    investments: int | None = None
    investments_current: int | None = Field(default=None, alias="investmentsCurrent")
    investments_non_current: int | None = Field(default=None, alias="investmentsNonCurrent")
    total_liabilities: int | None = Field(default=None, alias="totalLiabilities")
    current_liabilities: int | None = Field(default=None, alias="currentLiabilities")
    liabilities_non_current: int | None = Field(default=None, alias="liabilitiesNonCurrent")
    market_capitalization: int | None = Field(default=None, alias="marketCapitalization")
    net_cash_flow: int | None = Field(default=None, alias="netCashFlow")
    net_cash_flow_business_acquisitions_disposals: int | None = Field(default=None, alias="netCashFlowBusinessAcquisitionsDisposals")
    issuance_equity_shares: int | None = Field(default=None, alias="issuanceEquityShares")
    issuance_debt_securities: int | None = Field(default=None, alias="issuanceDebtSecurities")
    payment_dividends_other_cash_distributions: int | None = Field(default=None, alias="paymentDividendsOtherCashDistributions")
    net_cash_flow_from_financing: int | None = Field(default=None, alias="netCashFlowFromFinancing")
    net_cash_flow_from_investing: int | None = Field(default=None, alias="netCashFlowFromInvesting")
    net_cash_flow_investment_acquisitions_disposals: int | None = Field(default=None, alias="netCashFlowInvestmentAcquisitionsDisposals")
    net_cash_flow_from_operations: int | None = Field(default=None, alias="netCashFlowFromOperations")
    effect_of_exchange_rate_changes_on_cash: int | None = Field(default=None, alias="effectOfExchangeRateChangesOnCash")
    net_income: int | None = Field(default=None, alias="netIncome")
    net_income_common_stock: int | None = Field(default=None, alias="netIncomeCommonStock")
    net_income_common_stock_usd: int | None = Field(default=None, alias="netIncomeCommonStockUSD")
    net_loss_income_from_discontinued_operations: int | None = Field(default=None, alias="netLossIncomeFromDiscontinuedOperations")
    net_income_to_non_controlling_interests: int | None = Field(default=None, alias="netIncomeToNonControllingInterests")
    profit_margin: float | None = Field(default=None, alias="profitMargin")
    operating_expenses: int | None = Field(default=None, alias="operatingExpenses")
    operating_income: int | None = Field(default=None, alias="operatingIncome")
    trade_and_non_trade_payables: int | None = Field(default=None, alias="tradeAndNonTradePayables")
    payout_ratio: float | None = Field(default=None, alias="payoutRatio")
    price_to_book_value: float | None = Field(default=None, alias="priceToBookValue")
    price_earnings: float | None = Field(default=None, alias="priceEarnings")
    price_to_earnings_ratio: float | None = Field(default=None, alias="priceToEarningsRatio")
    property_plant_equipment_net: int | None = Field(default=None, alias="propertyPlantEquipmentNet")
    preferred_dividends_income_statement_impact: int | None = Field(default=None, alias="preferredDividendsIncomeStatementImpact")
    share_price_adjusted_close: float | None = Field(default=None, alias="sharePriceAdjustedClose")
    price_sales: float | None = Field(default=None, alias="priceSales")
    price_to_sales_ratio: float | None = Field(default=None, alias="priceToSalesRatio")
    trade_and_non_trade_receivables: int | None = Field(default=None, alias="tradeAndNonTradeReceivables")
    accumulated_retained_earnings_deficit: int | None = Field(default=None, alias="accumulatedRetainedEarningsDeficit")
    revenues: int | None = None
    revenues_usd: int | None = Field(default=None, alias="revenuesUSD")
    research_and_development_expense: int | None = Field(default=None, alias="researchAndDevelopmentExpense")
    return_on_average_assets: float | None = Field(default=None, alias="returnOnAverageAssets")
    return_on_average_equity: float | None = Field(default=None, alias="returnOnAverageEquity")
    return_on_invested_capital: float | None = Field(default=None, alias="returnOnInvestedCapital")
    return_on_sales: float | None = Field(default=None, alias="returnOnSales")
    share_based_compensation: int | None = Field(default=None, alias="shareBasedCompensation")
    selling_general_and_administrative_expense: int | None = Field(default=None, alias="sellingGeneralAndAdministrativeExpense")
    share_factor: float | None = Field(default=None, alias="shareFactor")
    shares: int | None = None
    weighted_average_shares: int | None = Field(default=None, alias="weightedAverageShares")
    weighted_average_shares_diluted: int | None = Field(default=None, alias="weightedAverageSharesDiluted")
    sales_per_share: float | None = Field(default=None, alias="salesPerShare")
    tangible_asset_value: int | None = Field(default=None, alias="tangibleAssetValue")
    tax_assets: int | None = Field(default=None, alias="taxAssets")
    income_tax_expense: int | None = Field(default=None, alias="incomeTaxExpense")
    tax_liabilities: int | None = Field(default=None, alias="taxLiabilities")
    tangible_assets_book_value_per_share: float | None = Field(default=None, alias="tangibleAssetsBookValuePerShare")
    working_capital: int | None = Field(default=None, alias="workingCapital")


class ReferenceStockFinancialsResponse(PolygonModel):
    status: str
    results: list[ReferenceStockFinancialsResult]


# Concept keys used in the vX statement maps

FAC_ASSETS = "assets"
FAC_BALANCE_SHEET_DATE = "balance_sheet_date"
FAC_BALANCE_SHEET_FORMAT = "balance_sheet_format"
FAC_BENEFITS_COSTS_EXPENSES = "benefits_costs_expenses"
FAC_CAPITALIZATION = "capitalization"
FAC_COMMITMENTS_AND_CONTINGENCIES = "commitments_and_contingencies"
FAC_COMPREHENSIVE_INCOME_LOSS = "comprehensive_income_loss"
FAC_COMPREHENSIVE_INCOME_LOSS_ATTRIBUTABLE_TO_NONCONTROLLING_INTEREST = "comprehensive_income_loss_attributable_to_noncontrolling_interest"
FAC_COMPREHENSIVE_INCOME_LOSS_ATTRIBUTABLE_TO_PARENT = "comprehensive_income_loss_attributable_to_parent"
FAC_COSTS_AND_EXPENSES = "costs_and_expenses"
FAC_COST_OF_REVENUE = "cost_of_revenue"
FAC_COST_OF_REVENUE_GOODS = "cost_of_revenue_goods"
FAC_COST_OF_REVENUE_SERVICES = "cost_of_revenue_services"
FAC_CURRENT_ASSETS = "current_assets"
FAC_CURRENT_LIABILITIES = "current_liabilities"
FAC_DOCUMENT_TYPE = "document_type"
FAC_ENTITY_CENTRAL_INDEX_KEY = "entity_central_index_key"
FAC_ENTITY_FILER_CATEGORY = "entity_filer_category"
FAC_ENTITY_REGISTRANT_NAME = "entity_registrant_name"
FAC_EQUITY = "equity"
FAC_EQUITY_ATTRIBUTABLE_TO_NONCONTROLLING_INTEREST = "equity_attributable_to_noncontrolling_interest"
FAC_EQUITY_ATTRIBUTABLE_TO_PARENT = "equity_attributable_to_parent"
FAC_EXCHANGE_GAINS_LOSSES = "exchange_gains_losses"
FAC_EXTRAORDINARY_ITEMS_OF_INCOME_EXPENSE_NET_OF_TAX = "extraordinary_items_of_income_expense_net_of_tax"
FAC_FISCAL_PERIOD_FOCUS = "fiscal_period_focus"
FAC_FISCAL_YEAR_END = "fiscal_year_end"
FAC_FISCAL_YEAR_FOCUS = "fiscal_year_focus"
FAC_FIXED_ASSETS = "fixed_assets"
FAC_GAIN_LOSS_ON_DISPOSITION_STOCK_IN_SUBSIDIARY_OR_EQUITY_METHOD_INVESTEE = "gain_loss_on_disposition_stock_in_subsidiary_or_equity_method_investee"
FAC_GAIN_LOSS_ON_SALE_PREVIOUSLY_UNISSUED_STOCK_BY_SUBSIDIARY_OR_EQUITY_INVESTEE_NONOPERATING_INCOME = "gain_loss_on_sale_previously_unissued_stock_by_subsidiary_or_equity_investee_nonoperating_income"
FAC_GAIN_LOSS_ON_SALE_PROPERTIES_NET_TAX = "gain_loss_on_sale_properties_net_tax"
FAC_GROSS_PROFIT = "gross_profit"
FAC_INCOME_LOSS_BEFORE_EQUITY_METHOD_INVESTMENTS = "income_loss_before_equity_method_investments"
FAC_INCOME_LOSS_FROM_CONTINUING_OPERATIONS_AFTER_TAX = "income_loss_from_continuing_operations_after_tax"
FAC_INCOME_LOSS_FROM_CONTINUING_OPERATIONS_BEFORE_TAX = "income_loss_from_continuing_operations_before_tax"
FAC_INCOME_LOSS_FROM_DISCONTINUED_OPERATIONS_NET_OF_TAX = "income_loss_from_discontinued_operations_net_of_tax"
FAC_INCOME_LOSS_FROM_DISCONTINUED_OPERATIONS_NET_OF_TAX_ADJUSTMENT_TO_PRIOR_YEAR_GAIN_LOSS_ON_DISPOSAL = "income_loss_from_discontinued_operations_net_of_tax_adjustment_to_prior_year_gain_loss_on_disposal"
FAC_INCOME_LOSS_FROM_DISCONTINUED_OPERATIONS_NET_OF_TAX_DURING_PHASE_OUT = "income_loss_from_discontinued_operations_net_of_tax_during_phase_out"
FAC_INCOME_LOSS_FROM_DISCONTINUED_OPERATIONS_NET_OF_TAX_GAIN_LOSS_ON_DISPOSAL = "income_loss_from_discontinued_operations_net_of_tax_gain_loss_on_disposal"
FAC_INCOME_LOSS_FROM_DISCONTINUED_OPERATIONS_NET_OF_TAX_PROVISION_FOR_GAIN_LOSS_ON_DISPOSAL = "income_loss_from_discontinued_operations_net_of_tax_provision_for_gain_loss_on_disposal"
FAC_INCOME_LOSS_FROM_EQUITY_METHOD_INVESTMENTS = "income_loss_from_equity_method_investments"
FAC_INCOME_STATEMENT_FORMAT = "income_statement_format"
FAC_INCOME_STATEMENT_START_PERIOD_YEAR_TO_DATE = "income_statement_start_period_year_to_date"
FAC_INCOME_TAX_EXPENSE_BENEFIT = "income_tax_expense_benefit"
FAC_INCOME_TAX_EXPENSE_BENEFIT_CURRENT = "income_tax_expense_benefit_current"
FAC_INCOME_TAX_EXPENSE_BENEFIT_DEFERRED = "income_tax_expense_benefit_deferred"
FAC_INDIRECT_OPERATING_NONOPERATING_COSTS_EXPENSES = "indirect_operating_nonoperating_costs_expenses"
FAC_INTEREST_AND_DEBT_EXPENSE = "interest_and_debt_expense"
FAC_INTEREST_AND_DIVIDEND_INCOME_OPERATING = "interest_and_dividend_income_operating"
FAC_INTEREST_EXPENSE = "interest_expense"
FAC_INTEREST_EXPENSE_OPERATING = "interest_expense_operating"
FAC_INTEREST_INCOME_EXPENSE_AFTER_PROVISION_FOR_LOSSES = "interest_income_expense_after_provision_for_losses"
FAC_INTEREST_INCOME_EXPENSE_OPERATING_NET = "interest_income_expense_operating_net"
FAC_LIABILITIES = "liabilities"
FAC_LIABILITIES_AND_EQUITY = "liabilities_and_equity"
FAC_LONG_TERM_DEBT = "long_term_debt"
FAC_NET_CASH_FLOW = "net_cash_flow"
FAC_NET_CASH_FLOW_CONTINUING = "net_cash_flow_continuing"
FAC_NET_CASH_FLOW_DISCONTINUED = "net_cash_flow_discontinued"
FAC_NET_CASH_FLOW_FROM_FINANCING_ACTIVITIES = "net_cash_flow_from_financing_activities"
FAC_NET_CASH_FLOW_FROM_FINANCING_ACTIVITIES_CONTINUING = "net_cash_flow_from_financing_activities_continuing"
FAC_NET_CASH_FLOW_FROM_FINANCING_ACTIVITIES_DISCONTINUED = "net_cash_flow_from_financing_activities_discontinued"
FAC_NET_CASH_FLOW_FROM_INVESTING_ACTIVITIES = "net_cash_flow_from_investing_activities"
FAC_NET_CASH_FLOW_FROM_INVESTING_ACTIVITIES_CONTINUING = "net_cash_flow_from_investing_activities_continuing"
FAC_NET_CASH_FLOW_FROM_INVESTING_ACTIVITIES_DISCONTINUED = "net_cash_flow_from_investing_activities_discontinued"
FAC_NET_CASH_FLOW_FROM_OPERATING_ACTIVITIES = "net_cash_flow_from_operating_activities"
FAC_NET_CASH_FLOW_FROM_OPERATING_ACTIVITIES_CONTINUING = "net_cash_flow_from_operating_activities_continuing"
FAC_NET_CASH_FLOW_FROM_OPERATING_ACTIVITIES_DISCONTINUED = "net_cash_flow_from_operating_activities_discontinued"
FAC_NET_INCOME_LOSS = "net_income_loss"
FAC_NET_INCOME_LOSS_ATTRIBUTABLE_TO_NONCONTROLLING_INTEREST = "net_income_loss_attributable_to_noncontrolling_interest"
FAC_NET_INCOME_LOSS_ATTRIBUTABLE_TO_NONCONTROLLING_INTEREST_PLUS_PREFERRED_STOCK_DIVIDENDS_AND_OTHER_ADJUSTMENTS = "net_income_loss_attributable_to_noncontrolling_interest_plus_preferred_stock_dividends_and_other_adjustments"
FAC_NET_INCOME_LOSS_ATTRIBUTABLE_TO_NONREDEEMABLE_NONCONTROLLING_INTEREST = "net_income_loss_attributable_to_nonredeemable_noncontrolling_interest"
FAC_NET_INCOME_LOSS_ATTRIBUTABLE_TO_PARENT = "net_income_loss_attributable_to_parent"
FAC_NET_INCOME_LOSS_ATTRIBUTABLE_TO_REDEEMABLE_NONCONTROLLING_INTEREST = "net_income_loss_attributable_to_redeemable_noncontrolling_interest"
FAC_NET_INCOME_LOSS_AVAILABLE_TO_COMMON_STOCKHOLDERS_BASIC = "net_income_loss_available_to_common_stockholders_basic"
FAC_NONCURRENT_ASSETS = "noncurrent_assets"
FAC_NONCURRENT_LIABILITIES = "noncurrent_liabilities"
FAC_NONINTEREST_EXPENSE = "noninterest_expense"
FAC_NONINTEREST_INCOME = "noninterest_income"
FAC_NONOPERATING_GAINS_LOSSES = "nonoperating_gains_losses"
FAC_NONOPERATING_INCOME_LOSS = "nonoperating_income_loss"
FAC_NONOPERATING_INCOME_LOSS_PLUS_INTEREST_AND_DEBT_EXPENSE = "nonoperating_income_loss_plus_interest_and_debt_expense"
FAC_NONOPERATING_INCOME_PLUS_INTEREST_AND_DEBT_EXPENSE_PLUS_INCOME_FROM_EQUITY_METHOD_INVESTMENTS = "nonoperating_income_plus_interest_and_debt_expense_plus_income_from_equity_method_investments"
FAC_OPERATING_AND_NONOPERATING_COSTS_AND_EXPENSES = "operating_and_nonoperating_costs_and_expenses"
FAC_OPERATING_AND_NONOPERATING_REVENUES = "operating_and_nonoperating_revenues"
FAC_OPERATING_EXPENSES = "operating_expenses"
FAC_OPERATING_INCOME_LOSS = "operating_income_loss"
FAC_OTHER_COMPREHENSIVE_INCOME_LOSS = "other_comprehensive_income_loss"
FAC_OTHER_COMPREHENSIVE_INCOME_LOSS_ATTRIBUTABLE_TO_NONCONTROLLING_INTEREST = "other_comprehensive_income_loss_attributable_to_noncontrolling_interest"
FAC_OTHER_COMPREHENSIVE_INCOME_LOSS_ATTRIBUTABLE_TO_PARENT = "other_comprehensive_income_loss_attributable_to_parent"
FAC_OTHER_NONCURRENT_ASSETS_OF_REGULATED_ENTITY = "other_noncurrent_assets_of_regulated_entity"
FAC_OTHER_NONCURRENT_LIABILITIES_OF_REGULATED_ENTITY = "other_noncurrent_liabilities_of_regulated_entity"
FAC_OTHER_OPERATING_INCOME_EXPENSES = "other_operating_income_expenses"
FAC_OTHER_THAN_FIXED_NONCURRENT_ASSETS = "other_than_fixed_noncurrent_assets"
FAC_PARTICIPATING_SECURITIES_DISTRIBUTED_AND_UNDISTRIBUTED_EARNINGS_LOSS_BASIC = "participating_securities_distributed_and_undistributed_earnings_loss_basic"
FAC_PREFERRED_STOCK_DIVIDENDS_AND_OTHER_ADJUSTMENTS = "preferred_stock_dividends_and_other_adjustments"
FAC_PROVISION_FOR_LOAN_LEASE_AND_OTHER_LOSSES = "provision_for_loan_lease_and_other_losses"
FAC_PUBLIC_UTILITIES_PROPERTY_PLANT_AND_EQUIPMENT_NET = "public_utilities_property_plant_and_equipment_net"
FAC_REDEEMABLE_NONCONTROLLING_INTEREST = "redeemable_noncontrolling_interest"
FAC_REDEEMABLE_NONCONTROLLING_INTEREST_COMMON = "redeemable_noncontrolling_interest_common"
FAC_REDEEMABLE_NONCONTROLLING_INTEREST_OTHER = "redeemable_noncontrolling_interest_other"
FAC_REDEEMABLE_NONCONTROLLING_INTEREST_PREFERRED = "redeemable_noncontrolling_interest_preferred"
FAC_RETURN_ON_ASSETS = "return_on_assets"
FAC_RETURN_ON_EQUITY = "return_on_equity"
FAC_RETURN_ON_SALES = "return_on_sales"
FAC_REVENUES = "revenues"
FAC_REVENUES_EXCLUDING_INTEREST_DIVIDENDS = "revenues_excluding_interest_dividends"
FAC_REVENUES_NET_INTEREST_EXPENSE = "revenues_net_interest_expense"
FAC_TEMPORARY_EQUITY = "temporary_equity"
FAC_TEMPORARY_EQUITY_ATTRIBUTABLE_TO_PARENT = "temporary_equity_attributable_to_parent"
FAC_TRADING_SYMBOL = "trading_symbol"
FAC_UNDISTRIBUTED_EARNINGS_LOSS_ALLOCATED_TO_PARTICIPATING_SECURITIES_BASIC = "undistributed_earnings_loss_allocated_to_participating_securities_basic"

FUNDAMENTAL_ACCOUNTING_CONCEPTS: tuple[str, ...] = (
    FAC_ASSETS,
    FAC_BALANCE_SHEET_DATE,
    FAC_BALANCE_SHEET_FORMAT,
    FAC_BENEFITS_COSTS_EXPENSES,
    FAC_CAPITALIZATION,
    FAC_COMMITMENTS_AND_CONTINGENCIES,
    FAC_COMPREHENSIVE_INCOME_LOSS,
    FAC_COMPREHENSIVE_INCOME_LOSS_ATTRIBUTABLE_TO_NONCONTROLLING_INTEREST,
    FAC_COMPREHENSIVE_INCOME_LOSS_ATTRIBUTABLE_TO_PARENT,
    FAC_COSTS_AND_EXPENSES,
    FAC_COST_OF_REVENUE,
    FAC_COST_OF_REVENUE_GOODS,
    FAC_COST_OF_REVENUE_SERVICES,
    FAC_CURRENT_ASSETS,
    FAC_CURRENT_LIABILITIES,
    FAC_DOCUMENT_TYPE,
    FAC_ENTITY_CENTRAL_INDEX_KEY,
    FAC_ENTITY_FILER_CATEGORY,
    FAC_ENTITY_REGISTRANT_NAME,
    FAC_EQUITY,
    FAC_EQUITY_ATTRIBUTABLE_TO_NONCONTROLLING_INTEREST,
    FAC_EQUITY_ATTRIBUTABLE_TO_PARENT,
    FAC_EXCHANGE_GAINS_LOSSES,
    FAC_EXTRAORDINARY_ITEMS_OF_INCOME_EXPENSE_NET_OF_TAX,
    FAC_FISCAL_PERIOD_FOCUS,
    FAC_FISCAL_YEAR_END,
    FAC_FISCAL_YEAR_FOCUS,
    FAC_FIXED_ASSETS,
    FAC_GAIN_LOSS_ON_DISPOSITION_STOCK_IN_SUBSIDIARY_OR_EQUITY_METHOD_INVESTEE,
    FAC_GAIN_LOSS_ON_SALE_PREVIOUSLY_UNISSUED_STOCK_BY_SUBSIDIARY_OR_EQUITY_INVESTEE_NONOPERATING_INCOME,
    FAC_GAIN_LOSS_ON_SALE_PROPERTIES_NET_TAX,
    FAC_GROSS_PROFIT,
    FAC_INCOME_LOSS_BEFORE_EQUITY_METHOD_INVESTMENTS,
    FAC_INCOME_LOSS_FROM_CONTINUING_OPERATIONS_AFTER_TAX,
    FAC_INCOME_LOSS_FROM_CONTINUING_OPERATIONS_BEFORE_TAX,
    FAC_INCOME_LOSS_FROM_DISCONTINUED_OPERATIONS_NET_OF_TAX,
    FAC_INCOME_LOSS_FROM_DISCONTINUED_OPERATIONS_NET_OF_TAX_ADJUSTMENT_TO_PRIOR_YEAR_GAIN_LOSS_ON_DISPOSAL,
    FAC_INCOME_LOSS_FROM_DISCONTINUED_OPERATIONS_NET_OF_TAX_DURING_PHASE_OUT,
    FAC_INCOME_LOSS_FROM_DISCONTINUED_OPERATIONS_NET_OF_TAX_GAIN_LOSS_ON_DISPOSAL,
    FAC_INCOME_LOSS_FROM_DISCONTINUED_OPERATIONS_NET_OF_TAX_PROVISION_FOR_GAIN_LOSS_ON_DISPOSAL,
    FAC_INCOME_LOSS_FROM_EQUITY_METHOD_INVESTMENTS,
    FAC_INCOME_STATEMENT_FORMAT,
    FAC_INCOME_STATEMENT_START_PERIOD_YEAR_TO_DATE,
    FAC_INCOME_TAX_EXPENSE_BENEFIT,
    FAC_INCOME_TAX_EXPENSE_BENEFIT_CURRENT,
    FAC_INCOME_TAX_EXPENSE_BENEFIT_DEFERRED,
    FAC_INDIRECT_OPERATING_NONOPERATING_COSTS_EXPENSES,
    FAC_INTEREST_AND_DEBT_EXPENSE,
    FAC_INTEREST_AND_DIVIDEND_INCOME_OPERATING,
    FAC_INTEREST_EXPENSE,
    FAC_INTEREST_EXPENSE_OPERATING,
    FAC_INTEREST_INCOME_EXPENSE_AFTER_PROVISION_FOR_LOSSES,
    FAC_INTEREST_INCOME_EXPENSE_OPERATING_NET,
    FAC_LIABILITIES,
    FAC_LIABILITIES_AND_EQUITY,
    FAC_LONG_TERM_DEBT,
    FAC_NET_CASH_FLOW,
    FAC_NET_CASH_FLOW_CONTINUING,
    FAC_NET_CASH_FLOW_DISCONTINUED,
    FAC_NET_CASH_FLOW_FROM_FINANCING_ACTIVITIES,
    FAC_NET_CASH_FLOW_FROM_FINANCING_ACTIVITIES_CONTINUING,
    FAC_NET_CASH_FLOW_FROM_FINANCING_ACTIVITIES_DISCONTINUED,
    FAC_NET_CASH_FLOW_FROM_INVESTING_ACTIVITIES,
    FAC_NET_CASH_FLOW_FROM_INVESTING_ACTIVITIES_CONTINUING,
    FAC_NET_CASH_FLOW_FROM_INVESTING_ACTIVITIES_DISCONTINUED,
    FAC_NET_CASH_FLOW_FROM_OPERATING_ACTIVITIES,
    FAC_NET_CASH_FLOW_FROM_OPERATING_ACTIVITIES_CONTINUING,
    FAC_NET_CASH_FLOW_FROM_OPERATING_ACTIVITIES_DISCONTINUED,
    FAC_NET_INCOME_LOSS,
    FAC_NET_INCOME_LOSS_ATTRIBUTABLE_TO_NONCONTROLLING_INTEREST,
    FAC_NET_INCOME_LOSS_ATTRIBUTABLE_TO_NONCONTROLLING_INTEREST_PLUS_PREFERRED_STOCK_DIVIDENDS_AND_OTHER_ADJUSTMENTS,
    FAC_NET_INCOME_LOSS_ATTRIBUTABLE_TO_NONREDEEMABLE_NONCONTROLLING_INTEREST,
    FAC_NET_INCOME_LOSS_ATTRIBUTABLE_TO_PARENT,
    FAC_NET_INCOME_LOSS_ATTRIBUTABLE_TO_REDEEMABLE_NONCONTROLLING_INTEREST,
    FAC_NET_INCOME_LOSS_AVAILABLE_TO_COMMON_STOCKHOLDERS_BASIC,
    FAC_NONCURRENT_ASSETS,
    FAC_NONCURRENT_LIABILITIES,
    FAC_NONINTEREST_EXPENSE,
    FAC_NONINTEREST_INCOME,
    FAC_NONOPERATING_GAINS_LOSSES,
    FAC_NONOPERATING_INCOME_LOSS,
    FAC_NONOPERATING_INCOME_LOSS_PLUS_INTEREST_AND_DEBT_EXPENSE,
    FAC_NONOPERATING_INCOME_PLUS_INTEREST_AND_DEBT_EXPENSE_PLUS_INCOME_FROM_EQUITY_METHOD_INVESTMENTS,
    FAC_OPERATING_AND_NONOPERATING_COSTS_AND_EXPENSES,
    FAC_OPERATING_AND_NONOPERATING_REVENUES,
    FAC_OPERATING_EXPENSES,
    FAC_OPERATING_INCOME_LOSS,
    FAC_OTHER_COMPREHENSIVE_INCOME_LOSS,
    FAC_OTHER_COMPREHENSIVE_INCOME_LOSS_ATTRIBUTABLE_TO_NONCONTROLLING_INTEREST,
    FAC_OTHER_COMPREHENSIVE_INCOME_LOSS_ATTRIBUTABLE_TO_PARENT,
    FAC_OTHER_NONCURRENT_ASSETS_OF_REGULATED_ENTITY,
    FAC_OTHER_NONCURRENT_LIABILITIES_OF_REGULATED_ENTITY,
    FAC_OTHER_OPERATING_INCOME_EXPENSES,
    FAC_OTHER_THAN_FIXED_NONCURRENT_ASSETS,
    FAC_PARTICIPATING_SECURITIES_DISTRIBUTED_AND_UNDISTRIBUTED_EARNINGS_LOSS_BASIC,
    FAC_PREFERRED_STOCK_DIVIDENDS_AND_OTHER_ADJUSTMENTS,
    FAC_PROVISION_FOR_LOAN_LEASE_AND_OTHER_LOSSES,
    FAC_PUBLIC_UTILITIES_PROPERTY_PLANT_AND_EQUIPMENT_NET,
    FAC_REDEEMABLE_NONCONTROLLING_INTEREST,
    FAC_REDEEMABLE_NONCONTROLLING_INTEREST_COMMON,
    FAC_REDEEMABLE_NONCONTROLLING_INTEREST_OTHER,
    FAC_REDEEMABLE_NONCONTROLLING_INTEREST_PREFERRED,
    FAC_RETURN_ON_ASSETS,
    FAC_RETURN_ON_EQUITY,
    FAC_RETURN_ON_SALES,
    FAC_REVENUES,
    FAC_REVENUES_EXCLUDING_INTEREST_DIVIDENDS,
    FAC_REVENUES_NET_INTEREST_EXPENSE,
    FAC_TEMPORARY_EQUITY,
    FAC_TEMPORARY_EQUITY_ATTRIBUTABLE_TO_PARENT,
    FAC_TRADING_SYMBOL,
    FAC_UNDISTRIBUTED_EARNINGS_LOSS_ALLOCATED_TO_PARTICIPATING_SECURITIES_BASIC,
)


# vX/reference/financials


class FundamentalAccountingConcept(PolygonModel):
    formula: str | None = None
    label: str | None = None
    order: int | None = None
    unit: str | None = None
    value: float | None = None


class FinancialDimensions(PolygonModel):
    """Statements of one filing, keyed by concept (``FAC_*``)."""

    balance_sheet: dict[str, FundamentalAccountingConcept] = Field(default_factory=dict)
    cash_flow_statement: dict[str, FundamentalAccountingConcept] = Field(default_factory=dict)
    comprehensive_income: dict[str, FundamentalAccountingConcept] = Field(default_factory=dict)
    income_statement: dict[str, FundamentalAccountingConcept] = Field(default_factory=dict)


class ReferenceStockFinancialsVXResult(PolygonModel):
    cik: str
    company_name: str
    end_date: str | None = None
    financials: FinancialDimensions
    fiscal_period: str
    fiscal_year: str
    source_filing_file_url: str
    start_date: str | None = None


class ReferenceStockFinancialsVXResponse(PolygonModel):
    count: int
    next_url: str | None = None
    request_id: str
    results: list[ReferenceStockFinancialsVXResult]
    status: str
