"""
Ranking core: scores a posting catalog against one profile and its
interaction history, producing a personalized ordering.

Modules
-------
compatibility : compute_match_score() + score_breakdown() + build_match_reasons()
                — pure functions, no I/O.
booster       : apply_interaction_boost() — history-aware boosts.
trend         : TrendSignal strategies + TrendBlender — population-trend blend.
pipeline      : RecommendationPipeline + recommend() — runs the stages and sorts.
filters       : search_postings() + filter_by_category() + top_n().
"""
