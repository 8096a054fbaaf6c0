'''
Sample paths of a Gaussian process, before and after conditioning.

Draw sample paths from a zero-mean Matérn prior, condition the process
on a few noisy observations, and draw sample paths from the posterior.
Noise is given here as a MultivariateNormal distribution of dimension
one; only its variance enters the computation.

The empirical pointwise variance of the posterior paths is compared to
the variance returned by predict.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
'''
import gpreg.num as gnp
import gpreg as gr


def main():
    """Return prior and posterior sample paths on a regular grid."""
    gnp.set_seed(1)
    n_paths = 200
    xt = gnp.linspace(0.0, 4.0, 41)

    covariance = gr.kernel.MaternKernel(2, 1.0, 0.8)
    prior = gr.GaussianProcess.zero_mean(covariance)
    prior_paths = prior.sample(xt, n_paths)
    print("Prior sample paths:", prior_paths.shape)

    noise = gr.MultivariateNormal([0.0], [[0.05 ** 2]])
    xi = [0.5, 1.2, 2.0, 3.3]
    zi = [0.1, 1.0, 0.4, 2.2]
    training_data = [(x, z, noise) for x, z in zip(xi, zi)]

    posterior, lml = gr.regression(prior, training_data)
    print(f"Log marginal likelihood: {lml:.3f}")

    posterior_paths = posterior.sample(xt, n_paths)
    zpm, zpv = posterior.predict(xt)

    empirical_var = gnp.var(posterior_paths, axis=0)
    print(f"Max pointwise variance, predicted: {float(gnp.max(zpv)):.4f}, "
          f"empirical: {float(gnp.max(empirical_var)):.4f}")

    # distribution of the posterior at one point
    zt_1 = posterior.marginal_at(1.0)
    print(f"Posterior at x=1.0: mean {zt_1.mean[0]:.4f}, variance {zt_1.cov[0, 0]:.4f}")

    return {
        "xt": xt,
        "prior_paths": prior_paths,
        "posterior_paths": posterior_paths,
        "zpm": zpm,
        "zpv": zpv,
    }


if __name__ == "__main__":
    main()
