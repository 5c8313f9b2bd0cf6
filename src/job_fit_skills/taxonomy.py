"""Skill taxonomy: canonical skill concepts for growth, marketing and RevOps roles.

Each row is ``(name, canonical, category, aliases)``. The taxonomy holds skill
concepts, not tools or platforms. ``SYNONYM_GROUPS`` and ``CANONICAL_RULES``
resolve abbreviations and loose phrasings onto taxonomy entries.
"""

from __future__ import annotations

from job_fit_core.models.skills import SkillEntry

_TAXONOMY_ROWS: tuple[tuple[str, str, str, tuple[str, ...]], ...] = (
    # --- GROWTH & ACQUISITION ---
    (
        "Conversion Rate Optimization", "conversion_rate_optimization", "Growth",
        ("CRO", "conversion optimization", "conversion improvement", "conversion analysis"),
    ),
    (
        "A/B Testing", "ab_testing", "Growth",
        ("split testing", "multivariate testing", "MVT", "experimentation", "test and learn"),
    ),
    (
        "Funnel Optimization", "funnel_optimization", "Growth",
        ("funnel analysis", "funnel management", "conversion funnel", "sales funnel optimization"),
    ),
    (
        "Growth Strategy", "growth_strategy", "Growth",
        ("growth planning", "growth initiatives", "growth roadmap", "scaling strategy"),
    ),
    (
        "User Acquisition", "user_acquisition", "Growth",
        ("customer acquisition", "UA", "acquisition strategy", "new user growth"),
    ),
    (
        "Growth Hacking", "growth_hacking", "Growth",
        ("growth marketing", "viral growth"),
    ),
    (
        "Landing Page Optimization", "landing_page_optimization", "Growth",
        ("LPO", "landing page design", "page optimization", "conversion pages"),
    ),
    (
        "Lead Generation", "lead_generation", "Growth",
        ("lead gen", "demand generation", "demand gen", "pipeline generation", "inbound leads"),
    ),
    (
        "Demand Generation Strategy", "demand_generation_strategy", "Growth",
        ("demand gen strategy", "demand generation strategy", "pipeline strategy", "pipeline growth"),
    ),
    (
        "Product-Led Growth", "product_led_growth", "Growth",
        ("product led growth", "product-led growth", "PLG motion", "PLG strategy"),
    ),
    (
        "Sales-Led Growth", "sales_led_growth", "Growth",
        ("sales led growth", "sales-led growth", "sales-led motion", "sales-led strategy"),
    ),
    (
        "Customer Journey Mapping", "customer_journey_mapping", "Growth",
        ("journey mapping", "user journey", "customer experience mapping", "CX mapping"),
    ),
    (
        "Go-to-Market Strategy", "go_to_market_strategy", "Growth",
        ("GTM", "GTM strategy", "market entry", "launch strategy", "market launch"),
    ),
    (
        "Market Expansion", "market_expansion", "Growth",
        ("new market entry", "geographic expansion", "market development", "international expansion"),
    ),
    (
        "Pricing Strategy", "pricing_strategy", "Growth",
        ("pricing optimization", "price modeling", "monetization strategy", "revenue pricing"),
    ),
    (
        "Product-Market Fit", "product_market_fit", "Growth",
        ("PMF", "market fit", "product fit analysis"),
    ),
    (
        "Viral Marketing", "viral_marketing", "Growth",
        ("viral loops", "referral loops", "viral coefficient", "K-factor optimization"),
    ),
    # --- MARKETING ---
    (
        "Digital Marketing", "digital_marketing", "Marketing",
        ("online marketing", "internet marketing", "web marketing"),
    ),
    (
        "Content Marketing", "content_marketing", "Marketing",
        ("content strategy", "content creation", "editorial strategy", "content development"),
    ),
    (
        "SEO", "seo", "Marketing",
        ("search engine optimization", "organic search", "search optimization", "SEO strategy"),
    ),
    (
        "SEM", "sem", "Marketing",
        ("search engine marketing", "paid search", "PPC", "pay per click", "search advertising"),
    ),
    (
        "Social Media Marketing", "social_media_marketing", "Marketing",
        ("social marketing", "SMM", "social media strategy", "social advertising"),
    ),
    (
        "Email Marketing", "email_marketing", "Marketing",
        ("email campaigns", "email strategy", "email automation", "newsletter marketing"),
    ),
    (
        "Performance Marketing", "performance_marketing", "Marketing",
        ("paid media", "paid acquisition", "digital advertising", "media buying"),
    ),
    (
        "Brand Marketing", "brand_marketing", "Marketing",
        ("brand strategy", "brand development", "brand management", "branding"),
    ),
    (
        "Marketing Strategy", "marketing_strategy", "Marketing",
        ("marketing planning", "marketing roadmap", "marketing leadership", "marketing strategy"),
    ),
    (
        "Influencer Marketing", "influencer_marketing", "Marketing",
        ("influencer partnerships", "creator marketing", "KOL marketing", "ambassador programs"),
    ),
    (
        "Affiliate Marketing", "affiliate_marketing", "Marketing",
        ("affiliate programs", "partner marketing", "referral marketing", "affiliate management"),
    ),
    (
        "Product Marketing", "product_marketing", "Marketing",
        ("PMM", "product positioning", "product messaging", "go-to-market"),
    ),
    (
        "Messaging & Positioning", "messaging_positioning", "Marketing",
        ("messaging", "positioning", "value proposition", "market positioning"),
    ),
    (
        "Marketing Automation", "marketing_automation", "Marketing",
        ("automated marketing", "marketing workflows", "drip campaigns", "nurture campaigns", "automation motions", "automated workflows"),
    ),
    (
        "B2B Marketing", "b2b_marketing", "Marketing",
        ("B2B", "B2B SaaS", "B2B SaaS marketing", "enterprise marketing", "business-to-business"),
    ),
    (
        "Campaign Management", "campaign_management", "Marketing",
        ("campaign planning", "campaign execution", "campaign optimization", "marketing campaigns"),
    ),
    (
        "Event Marketing", "event_marketing", "Marketing",
        ("event planning", "trade shows", "webinars", "conference marketing"),
    ),
    (
        "Field Marketing", "field_marketing", "Marketing",
        ("regional marketing", "field programs", "local marketing"),
    ),
    (
        "Community Marketing", "community_marketing", "Marketing",
        ("community building", "community strategy", "community-led growth", "community programs"),
    ),
    (
        "Account-Based Marketing", "account_based_marketing", "Marketing",
        ("ABM", "account based marketing", "account-based strategy", "account-based programs"),
    ),
    (
        "Outbound Marketing", "outbound_marketing", "Marketing",
        ("outbound campaigns", "outbound motion", "outbound strategy", "cold outreach"),
    ),
    (
        "Partner Marketing", "partner_marketing", "Marketing",
        ("partner-led growth", "ecosystem marketing", "alliances marketing", "co-marketing"),
    ),
    (
        "Paid Social Advertising", "paid_social_advertising", "Marketing",
        ("paid social", "social ads", "paid social campaigns", "social advertising"),
    ),
    (
        "Paid Search Advertising", "paid_search_advertising", "Marketing",
        ("paid search", "search ads", "search advertising", "PPC"),
    ),
    (
        "Out-of-Home Advertising", "out_of_home_advertising", "Marketing",
        ("OOH", "out of home", "out-of-home", "outdoor advertising"),
    ),
    (
        "Answer Engine Optimization", "answer_engine_optimization", "Marketing",
        ("AEO", "answer engine optimization", "AI search optimization", "LLM optimization"),
    ),
    (
        "Public Relations", "public_relations", "Marketing",
        ("PR", "media relations", "press relations", "communications"),
    ),
    (
        "Copywriting", "copywriting", "Marketing",
        ("content writing", "ad copy", "marketing copy", "persuasive writing"),
    ),
    (
        "Market Research", "market_research", "Marketing",
        ("market analysis", "competitive research", "market intelligence", "consumer research"),
    ),
    (
        "Competitive Analysis", "competitive_analysis", "Marketing",
        ("competitor analysis", "competitive intelligence", "market positioning"),
    ),
    # --- ANALYTICS & DATA ---
    (
        "Data Analysis", "data_analysis", "Analytics",
        ("data analytics", "analytical skills", "data interpretation", "data-driven decision making"),
    ),
    (
        "SQL", "sql", "Analytics",
        ("structured query language", "database querying", "SQL queries", "data querying"),
    ),
    (
        "Customer Segmentation", "customer_segmentation", "Analytics",
        ("audience segmentation", "market segmentation", "user segmentation", "cohort analysis"),
    ),
    (
        "Attribution Modeling", "attribution_modeling", "Analytics",
        ("marketing attribution", "multi-touch attribution", "MTA", "attribution analysis"),
    ),
    (
        "Predictive Analytics", "predictive_analytics", "Analytics",
        ("predictive modeling", "forecasting", "propensity modeling", "predictive intelligence"),
    ),
    (
        "Business Intelligence", "business_intelligence", "Analytics",
        ("BI", "reporting", "dashboarding", "data visualization"),
    ),
    (
        "Statistical Analysis", "statistical_analysis", "Analytics",
        ("statistics", "statistical modeling", "quantitative analysis", "statistical methods"),
    ),
    (
        "KPI Development", "kpi_development", "Analytics",
        ("metrics development", "KPI tracking", "performance metrics", "OKRs"),
    ),
    (
        "Market Sizing", "market_sizing", "Analytics",
        ("TAM", "SAM", "SOM", "total addressable market", "market sizing analysis"),
    ),
    (
        "Pipeline Analytics", "pipeline_analytics", "Analytics",
        ("pipeline analysis", "pipeline metrics", "pipeline velocity", "pipeline health"),
    ),
    (
        "Web Analytics", "web_analytics", "Analytics",
        ("website analytics", "digital analytics", "site analytics", "traffic analysis"),
    ),
    (
        "Data Modeling", "data_modeling", "Analytics",
        ("data architecture", "data schema", "database design", "data structures"),
    ),
    (
        "Regression Analysis", "regression_analysis", "Analytics",
        ("regression modeling", "linear regression", "logistic regression"),
    ),
    (
        "Cohort Analysis", "cohort_analysis", "Analytics",
        ("cohort studies", "user cohorts", "behavioral cohorts"),
    ),
    (
        "ROI Analysis", "roi_analysis", "Analytics",
        ("return on investment", "profitability analysis", "cost-benefit analysis", "ROAS"),
    ),
    (
        "CAC Analysis", "cac_analysis", "Analytics",
        ("customer acquisition cost", "CAC", "acquisition cost analysis", "cost per acquisition"),
    ),
    (
        "LTV Analysis", "ltv_analysis", "Analytics",
        ("lifetime value", "CLV", "customer lifetime value", "LTV modeling"),
    ),
    (
        "Unit Economics", "unit_economics", "Analytics",
        ("unit profitability", "contribution margin", "margin analysis"),
    ),
    # --- LIFECYCLE & RETENTION ---
    (
        "Customer Retention", "customer_retention", "Lifecycle",
        ("retention strategy", "user retention", "churn reduction", "retention marketing"),
    ),
    (
        "Churn Analysis", "churn_analysis", "Lifecycle",
        ("churn prediction", "churn modeling", "attrition analysis", "churn prevention"),
    ),
    (
        "Lifecycle Marketing", "lifecycle_marketing", "Lifecycle",
        ("customer lifecycle", "lifecycle campaigns", "lifecycle strategy", "CRM marketing"),
    ),
    (
        "Lead Nurturing", "lead_nurturing", "Lifecycle",
        ("lead nurture", "nurture programs", "nurture campaigns", "lead nurturing"),
    ),
    (
        "Onboarding Optimization", "onboarding_optimization", "Lifecycle",
        ("user onboarding", "customer onboarding", "activation", "first-time user experience"),
    ),
    (
        "Customer Success", "customer_success", "Lifecycle",
        ("CS", "customer success management", "client success", "account management"),
    ),
    (
        "Loyalty Programs", "loyalty_programs", "Lifecycle",
        ("rewards programs", "customer loyalty", "loyalty marketing", "retention programs"),
    ),
    (
        "Re-engagement Campaigns", "re_engagement_campaigns", "Lifecycle",
        ("win-back campaigns", "reactivation", "dormant user campaigns", "lapsed customer marketing"),
    ),
    (
        "NPS Management", "nps_management", "Lifecycle",
        ("net promoter score", "customer satisfaction", "CSAT", "customer feedback"),
    ),
    (
        "Customer Experience", "customer_experience", "Lifecycle",
        ("CX", "user experience", "UX", "experience design", "experience optimization"),
    ),
    (
        "Upselling", "upselling", "Lifecycle",
        ("upsell strategy", "expansion revenue", "account expansion"),
    ),
    (
        "Cross-selling", "cross_selling", "Lifecycle",
        ("cross-sell strategy", "product cross-sell", "bundle selling"),
    ),
    (
        "Personalization", "personalization", "Lifecycle",
        ("personalized marketing", "1:1 marketing", "dynamic content", "recommendation engines"),
    ),
    # --- TECHNICAL SKILLS ---
    (
        "Python", "python", "Technical",
        ("python programming", "python scripting", "python development"),
    ),
    (
        "R", "r_programming", "Technical",
        ("R programming", "R language", "R statistics"),
    ),
    (
        "Excel", "excel", "Technical",
        ("Microsoft Excel", "spreadsheets", "advanced Excel", "Excel modeling"),
    ),
    (
        "Data Visualization", "data_visualization", "Technical",
        ("data viz", "charting", "visual analytics", "dashboard design"),
    ),
    (
        "ETL", "etl", "Technical",
        ("extract transform load", "data pipelines", "data integration", "data engineering"),
    ),
    (
        "API Integration", "api_integration", "Technical",
        ("API management", "REST APIs", "integrations", "system integration"),
    ),
    (
        "HTML/CSS", "html_css", "Technical",
        ("HTML", "CSS", "web development basics", "front-end basics"),
    ),
    (
        "JavaScript", "javascript", "Technical",
        ("JS", "JavaScript development", "front-end development"),
    ),
    (
        "Machine Learning", "machine_learning", "Technical",
        ("ML", "AI", "artificial intelligence", "deep learning"),
    ),
    (
        "Data Science", "data_science", "Technical",
        ("data scientist skills", "applied data science", "quantitative methods"),
    ),
    (
        "Database Management", "database_management", "Technical",
        ("database administration", "DBA", "DBMS", "database design"),
    ),
    (
        "Technical Writing", "technical_writing", "Technical",
        ("documentation", "technical documentation", "API documentation"),
    ),
    # --- REVENUE OPERATIONS (RevOps) ---
    (
        "Revenue Operations", "revenue_operations", "Operations",
        ("RevOps", "revenue ops", "rev ops"),
    ),
    (
        "Sales Operations", "sales_operations", "Operations",
        ("sales ops", "salesops", "sales enablement"),
    ),
    (
        "Marketing Operations", "marketing_operations", "Operations",
        ("marketing ops", "MOps", "marops"),
    ),
    (
        "CRM Administration", "crm_administration", "Operations",
        ("CRM management", "CRM setup", "CRM optimization"),
    ),
    (
        "Process Optimization", "process_optimization", "Operations",
        ("process improvement", "workflow optimization", "operational efficiency"),
    ),
    (
        "Lead Scoring", "lead_scoring", "Operations",
        ("lead qualification", "lead prioritization", "MQL scoring", "SQL scoring"),
    ),
    (
        "Pipeline Management", "pipeline_management", "Operations",
        ("pipeline management", "pipeline operations", "pipeline strategy", "pipeline health"),
    ),
    (
        "ICP Definition", "icp_definition", "Operations",
        ("ICP", "ideal customer profile", "ICP definition", "customer profile definition"),
    ),
    (
        "Sales Forecasting", "sales_forecasting", "Operations",
        ("revenue forecasting", "pipeline forecasting", "demand forecasting"),
    ),
    (
        "Territory Planning", "territory_planning", "Operations",
        ("territory management", "sales territories", "account assignment"),
    ),
    (
        "Quota Management", "quota_management", "Operations",
        ("quota planning", "quota setting", "sales quotas"),
    ),
    (
        "Commission Planning", "commission_planning", "Operations",
        ("compensation planning", "incentive compensation", "sales compensation"),
    ),
    (
        "Data Governance", "data_governance", "Operations",
        ("data quality", "data management", "data hygiene", "data stewardship"),
    ),
    (
        "Tech Stack Management", "tech_stack_management", "Operations",
        ("martech stack", "sales tech stack", "tool administration"),
    ),
    # --- LEADERSHIP & STRATEGY ---
    (
        "Strategic Planning", "strategic_planning", "Leadership",
        ("strategy development", "business strategy", "strategic thinking"),
    ),
    (
        "Team Leadership", "team_leadership", "Leadership",
        ("people management", "team management", "leadership", "managing teams"),
    ),
    (
        "Cross-functional Collaboration", "cross_functional_collaboration", "Leadership",
        ("cross-team collaboration", "stakeholder management", "interdepartmental work"),
    ),
    (
        "Budget Management", "budget_management", "Leadership",
        ("budget planning", "financial management", "P&L management", "cost management"),
    ),
    (
        "Vendor Management", "vendor_management", "Leadership",
        ("vendor relations", "agency management", "partner management", "supplier management"),
    ),
    (
        "Project Management", "project_management", "Leadership",
        ("PM", "program management", "project planning", "project execution"),
    ),
    (
        "Executive Presentation", "executive_presentation", "Leadership",
        ("executive communication", "board presentations", "C-suite reporting"),
    ),
    (
        "Change Management", "change_management", "Leadership",
        ("organizational change", "transformation", "change leadership"),
    ),
    (
        "Hiring", "hiring", "Leadership",
        ("recruiting", "talent acquisition", "team building", "interviewing"),
    ),
    (
        "Mentoring", "mentoring", "Leadership",
        ("coaching", "developing talent", "career development"),
    ),
    (
        "Performance Management", "performance_management", "Leadership",
        ("performance reviews", "goal setting", "employee development"),
    ),
    # --- E-COMMERCE & D2C ---
    (
        "E-commerce Strategy", "ecommerce_strategy", "Ecommerce",
        ("ecommerce", "e-commerce", "online retail", "digital commerce"),
    ),
    (
        "DTC/D2C", "dtc_d2c", "Ecommerce",
        ("direct to consumer", "DTC", "D2C", "consumer direct"),
    ),
    (
        "Marketplace Management", "marketplace_management", "Ecommerce",
        ("Amazon", "marketplace optimization", "third-party marketplaces"),
    ),
    (
        "Subscription Commerce", "subscription_commerce", "Ecommerce",
        ("subscription business", "recurring revenue", "subscription model"),
    ),
    (
        "Cart Abandonment", "cart_abandonment", "Ecommerce",
        ("abandoned cart recovery", "checkout optimization", "cart recovery"),
    ),
    (
        "Product Catalog Management", "product_catalog_management", "Ecommerce",
        ("catalog management", "product information management", "PIM"),
    ),
    (
        "Inventory Management", "inventory_management", "Ecommerce",
        ("stock management", "inventory optimization", "supply chain"),
    ),
    (
        "Fulfillment Operations", "fulfillment_operations", "Ecommerce",
        ("order fulfillment", "shipping logistics", "3PL management"),
    ),
    # --- PRODUCT & UX ---
    (
        "Product Management", "product_management", "Product",
        ("product strategy", "product development", "product owner"),
    ),
    (
        "User Research", "user_research", "Product",
        ("UX research", "customer research", "usability testing", "user interviews"),
    ),
    (
        "Product Analytics", "product_analytics", "Product",
        ("product metrics", "feature analytics", "product data analysis"),
    ),
    (
        "Roadmap Planning", "roadmap_planning", "Product",
        ("product roadmap", "feature prioritization", "backlog management"),
    ),
    (
        "Wireframing", "wireframing", "Product",
        ("prototyping", "mockups", "UI design", "UX design"),
    ),
    (
        "Feature Prioritization", "feature_prioritization", "Product",
        ("prioritization frameworks", "RICE scoring", "MoSCoW"),
    ),
    (
        "A/B Testing for Product", "product_experimentation", "Product",
        ("product experiments", "feature testing", "product A/B testing"),
    ),
)

SKILL_TAXONOMY: tuple[SkillEntry, ...] = tuple(
    SkillEntry(name=name, canonical=canonical, category=category, aliases=aliases)
    for name, canonical, category, aliases in _TAXONOMY_ROWS
)

# Canonical key -> loose phrasings that mean the same skill
SYNONYM_GROUPS: dict[str, tuple[str, ...]] = {
    "conversion_rate_optimization": ("CRO", "conversion opt", "conv optimization", "conversion rate opt"),
    "ab_testing": ("A/B test", "split test", "experiment design", "testing and optimization"),
    "funnel_optimization": ("funnel analysis", "funnel mgmt", "sales funnel", "marketing funnel"),
    "go_to_market_strategy": ("GTM", "go to market", "gtm strategy", "market launch"),
    "lead_generation": ("lead gen", "demand gen", "pipeline building", "top of funnel"),
    "demand_generation_strategy": ("demand generation strategy", "demand gen strategy", "pipeline strategy", "pipeline growth"),
    "product_led_growth": ("product led growth", "product-led growth", "plg motion", "plg strategy"),
    "sales_led_growth": ("sales led growth", "sales-led growth", "sales-led motion"),
    "account_based_marketing": ("abm", "account based marketing", "account-based marketing", "account-based programs"),
    "outbound_marketing": ("outbound marketing", "outbound motion", "outbound campaigns", "cold outreach"),
    "partner_marketing": ("partner marketing", "partner-led growth", "ecosystem marketing", "alliances marketing"),
    "community_marketing": ("community marketing", "community building", "community-led growth", "community programs"),
    "field_marketing": ("field marketing", "regional marketing", "field programs"),
    "paid_social_advertising": ("paid social", "social ads", "paid social campaigns"),
    "paid_search_advertising": ("paid search", "search ads", "ppc"),
    "out_of_home_advertising": ("ooh", "out of home", "out-of-home", "outdoor advertising"),
    "answer_engine_optimization": ("aeo", "answer engine optimization", "ai search optimization", "llm optimization"),
    "messaging_positioning": ("messaging", "positioning", "value proposition", "market positioning"),
    "b2b_marketing": ("b2b", "b2b saas", "b2b marketing", "business to business", "business-to-business"),
    "marketing_strategy": ("marketing strategy", "marketing planning", "marketing roadmap"),
    "market_sizing": ("tam", "sam", "som", "total addressable market", "market sizing"),
    "pipeline_analytics": ("pipeline analytics", "pipeline metrics", "pipeline velocity", "pipeline analysis"),
    "lead_nurturing": ("lead nurture", "lead nurturing", "nurture programs", "nurture campaigns"),
    "pipeline_management": ("pipeline management", "pipeline operations", "pipeline strategy"),
    "icp_definition": ("icp", "ideal customer profile", "customer profile definition"),
    "customer_segmentation": ("segmentation", "audience segments", "user segments"),
    "email_marketing": ("email", "email campaigns", "ESP", "email automation"),
    "seo": ("search optimization", "organic search", "search rankings"),
    "sem": ("paid search", "PPC", "Google Ads", "search ads"),
    "sql": ("database queries", "query writing", "data extraction"),
    "data_analysis": ("analytics", "data analytics", "analyzing data"),
    "customer_retention": ("retention", "churn reduction", "keeping customers"),
    "lifecycle_marketing": ("lifecycle", "CRM", "customer journey"),
    "revenue_operations": ("RevOps", "Rev Ops", "revenue ops"),
    "marketing_operations": ("MOps", "marketing ops", "marops"),
    "sales_operations": ("sales ops", "salesops"),
    "business_intelligence": ("BI", "reporting", "dashboards"),
    "machine_learning": ("ML", "AI", "artificial intelligence"),
    "ltv_analysis": ("LTV", "CLV", "lifetime value", "customer value"),
    "cac_analysis": ("CAC", "acquisition cost", "customer acquisition cost"),
}

# Abbreviation or variant phrase -> taxonomy skill name
CANONICAL_RULES: dict[str, str] = {
    "cro": "conversion rate optimization",
    "gtm": "go-to-market strategy",
    "ppc": "sem",
    "seo": "seo",
    "sql": "sql",
    "mops": "marketing operations",
    "revops": "revenue operations",
    "bi": "business intelligence",
    "abm": "account-based marketing",
    "ooh": "out-of-home advertising",
    "aeo": "answer engine optimization",
    "icp": "icp definition",
    "tam": "market sizing",
    "sam": "market sizing",
    "som": "market sizing",
    "mql": "lead scoring",
    "plg": "product-led growth",
    "sales-led": "sales-led growth",
    "etl": "etl",
    "api": "api integration",
    "ml": "machine learning",
    "ai": "machine learning",
    "ltv": "ltv analysis",
    "clv": "ltv analysis",
    "cac": "cac analysis",
    "roas": "roi analysis",
    "kpi": "kpi development",
    "okr": "kpi development",
    "nps": "nps management",
    "csat": "nps management",
    "cx": "customer experience",
    "ux": "customer experience",
    "pmf": "product-market fit",
    "pmm": "product marketing",
    "pr": "public relations",
    "cs": "customer success",
    "dtc": "dtc/d2c",
    "d2c": "dtc/d2c",
    "a/b testing": "a/b testing",
    "split testing": "a/b testing",
    "multivariate testing": "a/b testing",
    "conversion optimization": "conversion rate optimization",
    "full funnel": "funnel optimization",
    "full-funnel": "funnel optimization",
    "demand generation": "demand generation strategy",
    "lead gen": "lead generation",
    "account based marketing": "account-based marketing",
    "account-based marketing": "account-based marketing",
    "outbound": "outbound marketing",
    "partner-led growth": "partner marketing",
    "ecosystem marketing": "partner marketing",
    "field marketing": "field marketing",
    "paid social": "paid social advertising",
    "pipeline management": "pipeline management",
    "market sizing": "market sizing",
    "ideal customer profile": "icp definition",
    "positioning": "messaging & positioning",
    "messaging": "messaging & positioning",
    "b2b": "b2b marketing",
    "b2b saas": "b2b marketing",
    "business to business": "b2b marketing",
    "business-to-business": "b2b marketing",
    "lifecycle": "lifecycle marketing",
    "retention marketing": "customer retention",
    "user retention": "customer retention",
    "churn prevention": "churn analysis",
    "analytics": "data analysis",
    "data analytics": "data analysis",
    "segmentation": "customer segmentation",
    "audience segmentation": "customer segmentation",
    "attribution": "attribution modeling",
    "forecasting": "predictive analytics",
    "personalization": "personalization",
    "onboarding": "onboarding optimization",
    "growth marketing": "growth hacking",
    "viral marketing": "viral marketing",
    "referral marketing": "affiliate marketing",
    "partner marketing": "affiliate marketing",
    "content strategy": "content marketing",
    "email campaigns": "email marketing",
    "marketing automation": "marketing automation",
    "automation motions": "marketing automation",
    "automated workflows": "marketing automation",
    "automation": "marketing automation",
    "crm": "crm administration",
    "process improvement": "process optimization",
    "workflow automation": "process optimization",
    "dashboard": "business intelligence",
    "dashboarding": "business intelligence",
    "reporting": "business intelligence",
    "python": "python",
    "r": "r programming",
    "javascript": "javascript",
    "html": "html/css",
    "css": "html/css",
    "excel": "excel",
    "spreadsheets": "excel",
}

OTHER_CATEGORY = "Other"
