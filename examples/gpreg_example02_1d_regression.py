'''
Gaussian process regression in 1D with noisy evaluations.

Observation points are drawn uniformly in [-1, 1] and the observed values
are a smooth test function plus Gaussian noise. The log marginal
likelihood is printed for a few lengthscales of the covariance, and the
posterior mean and variance are computed on a regular grid.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
'''
import gpreg.num as gnp
import gpreg as gr


def smooth_function(x):
    return gnp.sin(3.0 * x) + 0.5 * x


def generate_data(ni, noise_std):
    """Training triplets (point, value, noise variance) and a test grid."""
    box = gr.geometry.BoxDomain(-1.0, 1.0)
    sampler = gr.geometry.FixedPointsUniformBoxDomainSampler(box, ni)
    xi = gnp.array([float(p[0]) for p, _ in sampler.sample()])
    zi = smooth_function(xi) + noise_std * gnp.randn(ni)
    training_data = [(x, z, noise_std ** 2) for x, z in zip(xi, zi)]

    xt = gnp.linspace(-1.0, 1.0, 101)
    zt = smooth_function(xt)
    return box, training_data, xt, zt


def main():
    """Score a few lengthscales, then fit and predict on a grid."""
    gnp.set_seed(0)
    noise_std = 0.1
    box, training_data, xt, zt = generate_data(12, noise_std)

    prior_mean = gr.geometry.ScalarField(box, lambda x: 0.0)

    log_likelihoods = {}
    for lengthscale in [0.05, 0.2, 0.5, 1.0, 2.0]:
        covariance = gr.kernel.ExponentiatedQuadraticKernel(1.0, lengthscale)
        prior = gr.GaussianProcess(prior_mean, covariance)
        log_likelihoods[lengthscale] = gr.log_marginal_likelihood(prior, training_data)
        print(f"lengthscale {lengthscale:5.2f}: log marginal likelihood "
              f"{log_likelihoods[lengthscale]:9.3f}")

    best = max(log_likelihoods, key=log_likelihoods.get)
    print(f"Highest score: lengthscale {best}")

    # predictions use a fixed lengthscale
    lengthscale = 0.5

    prior = gr.GaussianProcess(prior_mean, gr.kernel.ExponentiatedQuadraticKernel(1.0, lengthscale))
    posterior, lml = gr.regression(prior, training_data)
    zpm, zpv = posterior.predict(xt)

    rmse = float(gnp.sqrt(gnp.mean((zpm - zt) ** 2)))
    coverage = float(gnp.mean(gnp.abs(zpm - zt) <= 1.96 * gnp.sqrt(zpv + noise_std ** 2)))
    print(f"Log marginal likelihood: {lml:.3f}")
    print(f"RMSE on the grid: {rmse:.4f}")
    print(f"Coverage of the 95% intervals: {coverage:.2f}")

    return {
        "log_likelihoods": log_likelihoods,
        "lengthscale": lengthscale,
        "best_score_lengthscale": best,
        "xt": xt,
        "zpm": zpm,
        "zpv": zpv,
        "rmse": rmse,
    }


if __name__ == "__main__":
    main()
